#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_allocations_info
short_description: List Nomad allocations
description:
  - Returns a summary of every allocation, optionally limited by an ID prefix or a filter expression.
options:
  prefix:
    description:
      - Only return allocations whose ID starts with this prefix.
    type: str
  filter:
    description:
      - A Nomad filter expression applied by the agent.
    type: str
  namespace:
    description:
      - Namespace to list allocations from. Use C(*) for every namespace.
    type: str
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: List the running allocations of the web job
  nomad.cluster.nomad_allocations_info:
    address: http://127.0.0.1:4646
    filter: JobID == "web" and ClientStatus == "running"
  register: result
"""

RETURN = r"""
id:
  description: Identity of the read, derived from the agent address and the API path.
  returned: always
  type: str
  sample: http://127.0.0.1:4646/v1/allocations
exists:
  description: Whether the listing exists.
  returned: always
  type: bool
allocations:
  description: The matching allocations, in the order returned by Nomad.
  returned: when exists
  type: list
  elements: dict
  contains:
    id:
      description: Allocation ID.
      type: str
    eval_id:
      description: ID of the evaluation that created the allocation.
      type: str
    name:
      description: Name of the allocation.
      type: str
    namespace:
      description: Namespace of the allocation.
      type: str
    node_id:
      description: ID of the node running the allocation.
      type: str
    node_name:
      description: Name of the node running the allocation.
      type: str
    job_id:
      description: ID of the job.
      type: str
    job_type:
      description: Type of the job.
      type: str
    job_version:
      description: Version of the job.
      type: int
    task_group:
      description: Name of the task group.
      type: str
    desired_status:
      description: Status the scheduler wants the allocation in.
      type: str
    client_status:
      description: Status reported by the client.
      type: str
    followup_eval_id:
      description: ID of the follow-up evaluation, if any.
      type: str
    next_allocation:
      description: ID of the allocation that replaced this one, if any.
      type: str
    preempted_by_allocation:
      description: ID of the allocation that preempted this one, if any.
      type: str
    create_index:
      description: Create index of the allocation.
      type: int
    modify_index:
      description: Modify index of the allocation.
      type: int
    create_time:
      description: Creation time in nanoseconds since the epoch.
      type: int
    modify_time:
      description: Last modification time in nanoseconds since the epoch.
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
    ALLOCATIONS,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(
            prefix=dict(type="str"),
            filter=dict(type="str"),
            namespace=dict(type="str"),
        ),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, ALLOCATIONS)
    runner.run()


if __name__ == "__main__":
    main()
