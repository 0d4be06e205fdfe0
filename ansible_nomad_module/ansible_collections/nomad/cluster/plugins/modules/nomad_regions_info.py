#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_regions_info
short_description: List Nomad regions
description:
  - Returns the names of every region known to the cluster.
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: List regions
  nomad.cluster.nomad_regions_info:
    address: http://127.0.0.1:4646
  register: result
"""

RETURN = r"""
id:
  description: Identity of the read, derived from the agent address and the API path.
  returned: always
  type: str
  sample: http://127.0.0.1:4646/v1/regions
exists:
  description: Whether the listing exists.
  returned: always
  type: bool
regions:
  description: Region names, in the order returned by Nomad.
  returned: when exists
  type: list
  elements: str
  sample: [global]
"""

from ansible.module_utils.basic import AnsibleModule
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.client import (
    nomad_argument_spec,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.facts_runner import (
    FactsRunner,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.resources import (
    REGIONS,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, REGIONS)
    runner.run()


if __name__ == "__main__":
    main()
