#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_acl_role_info
short_description: Read a Nomad ACL role
description:
  - Returns the name, description and linked policies of a single ACL role.
  - A role that does not exist is reported with O(exists=false) rather than as a failure.
options:
  id:
    description:
      - The ACL role unique identifier.
    type: str
    required: true
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: Read an ACL role
  nomad.cluster.nomad_acl_role_info:
    address: http://127.0.0.1:4646
    id: 5b5a1ba4-2c47-4b1c-8f4c-0d6d7c4f0b7e
  register: role
"""

RETURN = r"""
id:
  description: The role ID, or an empty string when the role does not exist.
  returned: always
  type: str
exists:
  description: Whether the role exists.
  returned: always
  type: bool
name:
  description: Unique name of the ACL role.
  returned: when exists
  type: str
description:
  description: Description of the ACL role.
  returned: when exists
  type: str
policies:
  description: The ACL policies linked to the role, as an unordered set sorted by name.
  returned: when exists
  type: list
  elements: dict
  contains:
    name:
      description: Name of the linked policy.
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
    ACL_ROLE,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(id=dict(type="str", required=True)),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, ACL_ROLE)
    runner.run()


if __name__ == "__main__":
    main()
