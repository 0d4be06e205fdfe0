#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_acl_tokens_info
short_description: List Nomad ACL tokens
description:
  - Returns every ACL token, optionally limited to accessor IDs starting with a prefix.
  - Token secrets are not part of the listing.
options:
  prefix:
    description:
      - Only return tokens whose accessor ID starts with this prefix.
    type: str
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: List tokens
  nomad.cluster.nomad_acl_tokens_info:
    address: http://127.0.0.1:4646
    prefix: 9c8a
  register: result
"""

RETURN = r"""
id:
  description: Identity of the read, derived from the agent address and the API path.
  returned: always
  type: str
  sample: http://127.0.0.1:4646/v1/acl/tokens
exists:
  description: Whether the listing exists.
  returned: always
  type: bool
acl_tokens:
  description: The matching tokens, in the order returned by Nomad.
  returned: when exists
  type: list
  elements: dict
  contains:
    accessor_id:
      description: Non-sensitive identifier of the token.
      type: str
    name:
      description: Name of the token.
      type: str
    type:
      description: Type of the token.
      type: str
    policies:
      description: Names of the attached policies, in the order returned by Nomad.
      type: list
      elements: str
    global:
      description: Whether the token is replicated to all regions.
      type: bool
    create_time:
      description: Creation time exactly as returned by Nomad.
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
    ACL_TOKENS,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(prefix=dict(type="str")),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, ACL_TOKENS)
    runner.run()


if __name__ == "__main__":
    main()
