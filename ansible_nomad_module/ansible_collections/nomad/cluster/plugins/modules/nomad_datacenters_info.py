#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_datacenters_info
short_description: List the datacenters of a Nomad cluster
description:
  - Returns the sorted, distinct datacenters of the cluster's client nodes.
options:
  prefix:
    description:
      - Only return datacenters whose name starts with this prefix.
    type: str
  ignore_down_nodes:
    description:
      - Skip nodes whose status is C(down).
    type: bool
    default: false
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: List the datacenters with live nodes
  nomad.cluster.nomad_datacenters_info:
    address: http://127.0.0.1:4646
    prefix: eu-
    ignore_down_nodes: true
  register: result
"""

RETURN = r"""
id:
  description: A fresh opaque identity for every read.
  returned: always
  type: str
exists:
  description: Whether the listing exists.
  returned: always
  type: bool
datacenters:
  description: The matching datacenter names, sorted.
  returned: when exists
  type: list
  elements: str
  sample: [eu-west-1, eu-west-2]
"""

from ansible.module_utils.basic import AnsibleModule
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.client import (
    nomad_argument_spec,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.facts_runner import (
    FactsRunner,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.resources import (
    DATACENTERS,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(
            prefix=dict(type="str"),
            ignore_down_nodes=dict(type="bool", default=False),
        ),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, DATACENTERS)
    runner.run()


if __name__ == "__main__":
    main()
