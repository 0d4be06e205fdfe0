#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_scheduler_config_info
short_description: Read the Nomad scheduler configuration
description:
  - Returns the cluster-wide scheduler configuration, including the preemption settings per scheduler.
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: Read the scheduler configuration
  nomad.cluster.nomad_scheduler_config_info:
    address: http://127.0.0.1:4646
  register: scheduler
"""

RETURN = r"""
id:
  description: An opaque token generated for this read. It changes on every run.
  returned: always
  type: str
exists:
  description: Whether the configuration was read.
  returned: always
  type: bool
memory_oversubscription_enabled:
  description: Whether tasks may use more memory than they reserve.
  returned: success
  type: bool
scheduler_algorithm:
  description: Whether the scheduler binpacks or spreads allocations on available nodes.
  returned: success
  type: str
  sample: binpack
preemption_config:
  description: Whether preemption is enabled for each scheduler.
  returned: success
  type: dict
  contains:
    batch_scheduler_enabled:
      description: Preemption for batch jobs.
      type: bool
    service_scheduler_enabled:
      description: Preemption for service jobs.
      type: bool
    system_scheduler_enabled:
      description: Preemption for system jobs.
      type: bool
"""

from ansible.module_utils.basic import AnsibleModule
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.client import (
    nomad_argument_spec,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.facts_runner import (
    FactsRunner,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.resources import (
    SCHEDULER_CONFIG,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, SCHEDULER_CONFIG)
    runner.run()


if __name__ == "__main__":
    main()
