#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_node_pool_info
short_description: Read a Nomad node pool
description:
  - Returns the description, metadata and scheduler settings of a single node pool.
  - A node pool that does not exist is reported with O(exists=false) rather than as a failure.
options:
  name:
    description:
      - Name of the node pool.
    type: str
    required: true
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: Read the gpu node pool
  nomad.cluster.nomad_node_pool_info:
    address: http://127.0.0.1:4646
    name: gpu
  register: pool
"""

RETURN = r"""
id:
  description: The node pool name, or an empty string when it does not exist.
  returned: always
  type: str
exists:
  description: Whether the node pool exists.
  returned: always
  type: bool
name:
  description: Name of the node pool.
  returned: when exists
  type: str
description:
  description: Description of the node pool.
  returned: when exists
  type: str
meta:
  description: Metadata of the node pool.
  returned: when exists
  type: dict
node_identity_ttl:
  description: TTL of the node identities issued in this pool, empty when the agent does not report one.
  returned: when exists
  type: str
  sample: 24h0m0s
scheduler_config:
  description: Scheduler settings of the node pool.
  returned: when exists
  type: dict
  sample: {scheduler_algorithm: spread, memory_oversubscription: enabled}
"""

from ansible.module_utils.basic import AnsibleModule
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.client import (
    nomad_argument_spec,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.facts_runner import (
    FactsRunner,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.resources import (
    NODE_POOL,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(name=dict(type="str", required=True)),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, NODE_POOL)
    runner.run()


if __name__ == "__main__":
    main()
