#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_acl_policies_info
short_description: List Nomad ACL policies
description:
  - Returns the name and description of every ACL policy, optionally limited to names starting with a prefix.
options:
  prefix:
    description:
      - Only return policies whose name starts with this prefix.
    type: str
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: List the team policies
  nomad.cluster.nomad_acl_policies_info:
    address: http://127.0.0.1:4646
    prefix: team-
  register: result
"""

RETURN = r"""
id:
  description: Identity of the read, derived from the agent address and the API path.
  returned: always
  type: str
  sample: http://127.0.0.1:4646/v1/acl/policies
exists:
  description: Whether the listing exists.
  returned: always
  type: bool
policies:
  description: The matching ACL policies, in the order returned by Nomad.
  returned: when exists
  type: list
  elements: dict
  contains:
    name:
      description: Name of the policy.
      type: str
    description:
      description: Description of the policy.
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
    ACL_POLICIES,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(prefix=dict(type="str")),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, ACL_POLICIES)
    runner.run()


if __name__ == "__main__":
    main()
