#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_scaling_policy_info
short_description: Read a Nomad scaling policy
description:
  - Returns the bounds, target and policy document of a single scaling policy.
  - A policy that does not exist is reported with O(exists=false) rather than as a failure.
options:
  id:
    description:
      - The scaling policy ID.
    type: str
    required: true
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: Read a scaling policy
  nomad.cluster.nomad_scaling_policy_info:
    address: http://127.0.0.1:4646
    id: ad19848d-1921-179c-affa-244a3543be88
  register: policy
"""

RETURN = r"""
id:
  description: The scaling policy ID, or an empty string when it does not exist.
  returned: always
  type: str
exists:
  description: Whether the scaling policy exists.
  returned: always
  type: bool
enabled:
  description: Whether the scaling policy is enabled.
  returned: when exists
  type: bool
type:
  description: The scaling policy type.
  returned: when exists
  type: str
min:
  description: The minimum value of the scaling policy.
  returned: when exists
  type: int
max:
  description: The maximum value of the scaling policy.
  returned: when exists
  type: int
policy:
  description: The policy document as compact JSON text with sorted keys.
  returned: when exists
  type: str
target:
  description: The scaling policy target.
  returned: when exists
  type: dict
  sample: {Namespace: default, Job: web, Group: frontend}
"""

from ansible.module_utils.basic import AnsibleModule
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.client import (
    nomad_argument_spec,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.facts_runner import (
    FactsRunner,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.resources import (
    SCALING_POLICY,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(id=dict(type="str", required=True)),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, SCALING_POLICY)
    runner.run()


if __name__ == "__main__":
    main()
