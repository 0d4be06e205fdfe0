#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_acl_roles_info
short_description: List Nomad ACL roles
description:
  - Returns every ACL role, optionally limited to role IDs starting with a prefix.
options:
  prefix:
    description:
      - Only return roles whose ID starts with this prefix.
    type: str
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: List all ACL roles
  nomad.cluster.nomad_acl_roles_info:
    address: http://127.0.0.1:4646
  register: result
"""

RETURN = r"""
id:
  description: Identity of the read, derived from the agent address and the API path.
  returned: always
  type: str
  sample: http://127.0.0.1:4646/v1/acl/roles
exists:
  description: Whether the listing exists.
  returned: always
  type: bool
acl_roles:
  description: The matching ACL roles, in the order returned by Nomad.
  returned: when exists
  type: list
  elements: dict
  contains:
    id:
      description: The ACL role unique identifier.
      type: str
    name:
      description: Unique name of the ACL role.
      type: str
    description:
      description: Description of the ACL role.
      type: str
    policies:
      description: The linked ACL policies, as an unordered set of C({name}) records.
      type: list
      elements: dict
"""

from ansible.module_utils.basic import AnsibleModule
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.client import (
    nomad_argument_spec,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.facts_runner import (
    FactsRunner,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.resources import (
    ACL_ROLES,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(prefix=dict(type="str")),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, ACL_ROLES)
    runner.run()


if __name__ == "__main__":
    main()
