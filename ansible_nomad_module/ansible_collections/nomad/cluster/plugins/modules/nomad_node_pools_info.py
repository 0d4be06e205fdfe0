#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_node_pools_info
short_description: List Nomad node pools
description:
  - Returns every node pool, optionally limited by a name prefix or a filter expression.
options:
  prefix:
    description:
      - Only return node pools whose name starts with this prefix.
    type: str
  filter:
    description:
      - A Nomad filter expression applied by the agent.
    type: str
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: List the GPU node pools
  nomad.cluster.nomad_node_pools_info:
    address: http://127.0.0.1:4646
    filter: Meta.gpu == "true"
  register: result
"""

RETURN = r"""
id:
  description: Identity of the read, derived from the agent address and the API path.
  returned: always
  type: str
  sample: http://127.0.0.1:4646/v1/node/pools
exists:
  description: Whether the listing exists.
  returned: always
  type: bool
node_pools:
  description: The matching node pools, in the order returned by Nomad.
  returned: when exists
  type: list
  elements: dict
  contains:
    name:
      description: Name of the node pool.
      type: str
    description:
      description: Description of the node pool.
      type: str
    meta:
      description: Metadata of the node pool.
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
    NODE_POOLS,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(
            prefix=dict(type="str"),
            filter=dict(type="str"),
        ),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, NODE_POOLS)
    runner.run()


if __name__ == "__main__":
    main()
