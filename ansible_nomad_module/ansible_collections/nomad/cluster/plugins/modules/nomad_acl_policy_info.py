#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_acl_policy_info
short_description: Read a Nomad ACL policy
description:
  - Returns the description and rules of a single ACL policy.
  - A policy that does not exist is reported with O(exists=false) rather than as a failure.
options:
  name:
    description:
      - Name of the ACL policy.
    type: str
    required: true
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: Read the operators policy
  nomad.cluster.nomad_acl_policy_info:
    address: http://127.0.0.1:4646
    name: operators
  register: policy
"""

RETURN = r"""
id:
  description: The policy name, or an empty string when the policy does not exist.
  returned: always
  type: str
exists:
  description: Whether the policy exists.
  returned: always
  type: bool
description:
  description: Description of the policy.
  returned: when exists
  type: str
rules:
  description: The policy rules in HCL format.
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
    ACL_POLICY,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(name=dict(type="str", required=True)),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, ACL_POLICY)
    runner.run()


if __name__ == "__main__":
    main()
