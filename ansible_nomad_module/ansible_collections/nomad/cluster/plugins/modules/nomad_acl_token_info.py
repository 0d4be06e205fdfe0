#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_acl_token_info
short_description: Read a Nomad ACL token
description:
  - Returns a single ACL token looked up by its accessor ID, including its secret.
  - A token that does not exist is reported with O(exists=false) rather than as a failure.
options:
  accessor_id:
    description:
      - Non-sensitive identifier of the token.
    type: str
    required: true
extends_documentation_fragment:
  - nomad.cluster.nomad
notes:
  - The returned RV(secret_id) is the token itself. Use C(no_log) on tasks that register it.
"""

EXAMPLES = r"""
- name: Read a token
  nomad.cluster.nomad_acl_token_info:
    address: http://127.0.0.1:4646
    accessor_id: 9c8a3b3d-6b9c-4a7e-a0f0-7c2d8f1c7a11
  register: token
  no_log: true
"""

RETURN = r"""
id:
  description: The accessor ID, or an empty string when the token does not exist.
  returned: always
  type: str
exists:
  description: Whether the token exists.
  returned: always
  type: bool
name:
  description: Human-friendly name of the token.
  returned: when exists
  type: str
type:
  description: The type of the token, C(client) or C(management).
  returned: when exists
  type: str
policies:
  description: Names of the policies attached to the token, in the order returned by Nomad.
  returned: when exists
  type: list
  elements: str
secret_id:
  description: The token value itself.
  returned: when exists
  type: str
global:
  description: Whether the token is replicated to all regions.
  returned: when exists
  type: bool
create_time:
  description: Creation time of the token, in ISO 8601 format normalized to UTC.
  returned: when exists
  type: str
  sample: "2024-05-01T09:30:00.123456+00:00"
roles:
  description: The ACL roles applied to the token, as an unordered set.
  returned: when exists
  type: list
  elements: dict
  contains:
    id:
      description: ID of the role.
      type: str
    name:
      description: Name of the role.
      type: str
expiration_ttl:
  description: The expiration TTL of the token, e.g. C(1h0m0s).
  returned: when exists
  type: str
expiration_time:
  description: The point after which the token is considered revoked, normalized to UTC. Empty if the token does not expire.
  returned: when exists
  type: str
"""

from ansible.module_utils.basic import AnsibleModule
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.client import (
    nomad_argument_spec,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.facts_runner import (
    FactsRunner,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.resources import (
    ACL_TOKEN,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(accessor_id=dict(type="str", required=True)),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, ACL_TOKEN)
    runner.run()


if __name__ == "__main__":
    main()
