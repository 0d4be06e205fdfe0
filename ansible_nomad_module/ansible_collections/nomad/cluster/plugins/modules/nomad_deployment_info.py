#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_deployment_info
short_description: Read a Nomad deployment
description:
  - Returns the job, status and per task group progress of a single deployment.
  - A deployment that does not exist is reported with O(exists=false) rather than as a failure.
options:
  deployment_id:
    description:
      - ID of the deployment.
    type: str
    required: true
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: Read a deployment
  nomad.cluster.nomad_deployment_info:
    address: http://127.0.0.1:4646
    deployment_id: 70638f62-5c19-193e-30d6-f9d6e689ab8e
  register: deployment
"""

RETURN = r"""
id:
  description: The deployment ID, or an empty string when it does not exist.
  returned: always
  type: str
exists:
  description: Whether the deployment exists.
  returned: always
  type: bool
namespace:
  description: Namespace of the deployed job.
  returned: when exists
  type: str
job_id:
  description: ID of the deployed job.
  returned: when exists
  type: str
job_version:
  description: Version of the deployed job.
  returned: when exists
  type: int
job_create_index:
  description: Create index of the deployed job.
  returned: when exists
  type: int
job_modify_index:
  description: Modify index of the deployed job.
  returned: when exists
  type: int
task_groups:
  description: Deployment state of each task group, keyed by group name.
  returned: when exists
  type: dict
  sample:
    cache:
      placed_canaries: []
      auto_revert: false
      promoted: false
      desired_canaries: 0
      desired_total: 1
      placed_alloc: 1
      healthy_alloc: 1
      unhealthy_alloc: 0
status:
  description: Status of the deployment.
  returned: when exists
  type: str
status_description:
  description: Human-readable description of the status.
  returned: when exists
  type: str
create_index:
  description: Create index of the deployment.
  returned: when exists
  type: int
modify_index:
  description: Modify index of the deployment.
  returned: when exists
  type: int
"""

from ansible.module_utils.basic import AnsibleModule
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.client import (
    nomad_argument_spec,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.facts_runner import (
    FactsRunner,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.resources import (
    DEPLOYMENT,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(deployment_id=dict(type="str", required=True)),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, DEPLOYMENT)
    runner.run()


if __name__ == "__main__":
    main()
