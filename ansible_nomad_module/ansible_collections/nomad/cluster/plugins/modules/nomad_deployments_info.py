#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_deployments_info
short_description: List Nomad deployments
description:
  - Returns a summary of every deployment known to the cluster.
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: List deployments
  nomad.cluster.nomad_deployments_info:
    address: http://127.0.0.1:4646
  register: result
"""

RETURN = r"""
id:
  description: Identity of the read, derived from the agent address and the API path.
  returned: always
  type: str
  sample: http://127.0.0.1:4646/v1/deployments
exists:
  description: Whether the listing exists.
  returned: always
  type: bool
deployments:
  description: The deployments, in the order returned by Nomad.
  returned: when exists
  type: list
  elements: dict
  contains:
    ID:
      description: Deployment ID.
      type: str
    JobID:
      description: ID of the deployed job.
      type: str
    JobVersion:
      description: Version of the deployed job, as decimal text.
      type: str
    Status:
      description: Status of the deployment.
      type: str
    StatusDescription:
      description: Human-readable description of the status.
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
    DEPLOYMENTS,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, DEPLOYMENTS)
    runner.run()


if __name__ == "__main__":
    main()
