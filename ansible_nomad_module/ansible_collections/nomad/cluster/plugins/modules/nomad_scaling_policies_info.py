#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_scaling_policies_info
short_description: List Nomad scaling policies
description:
  - Returns every scaling policy, optionally limited to one job or one policy type.
options:
  job_id:
    description:
      - Only return the policies of this job.
    type: str
  type:
    description:
      - Only return policies of this type, e.g. C(horizontal).
    type: str
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: List the scaling policies of a job
  nomad.cluster.nomad_scaling_policies_info:
    address: http://127.0.0.1:4646
    job_id: web
  register: result
"""

RETURN = r"""
id:
  description: Identity of the read, derived from the agent address and the API path.
  returned: always
  type: str
  sample: http://127.0.0.1:4646/v1/scaling/policies
exists:
  description: Whether the listing exists.
  returned: always
  type: bool
policies:
  description: The matching scaling policies, in the order returned by Nomad.
  returned: when exists
  type: list
  elements: dict
  contains:
    id:
      description: The scaling policy ID.
      type: str
    enabled:
      description: Whether the policy is enabled.
      type: bool
    type:
      description: The scaling policy type.
      type: str
    target:
      description: The scaling policy target.
      type: dict
"""

from ansible.module_utils.basic import AnsibleModule
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.client import (
    nomad_argument_spec,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.facts_runner import (
    FactsRunner,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.resources import (
    SCALING_POLICIES,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(
            job_id=dict(type="str"),
            type=dict(type="str"),
        ),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, SCALING_POLICIES)
    runner.run()


if __name__ == "__main__":
    main()
