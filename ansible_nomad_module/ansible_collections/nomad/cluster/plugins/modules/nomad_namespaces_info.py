#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_namespaces_info
short_description: List Nomad namespaces
description:
  - Returns the names of every namespace.
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: List namespaces
  nomad.cluster.nomad_namespaces_info:
    address: http://127.0.0.1:4646
  register: result
"""

RETURN = r"""
id:
  description: Identity of the read, derived from the agent address and the API path.
  returned: always
  type: str
  sample: http://127.0.0.1:4646/v1/namespaces
exists:
  description: Whether the listing exists.
  returned: always
  type: bool
namespaces:
  description: Namespace names, in the order returned by Nomad.
  returned: when exists
  type: list
  elements: str
  sample: [default, prod]
"""

from ansible.module_utils.basic import AnsibleModule
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.client import (
    nomad_argument_spec,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.facts_runner import (
    FactsRunner,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.resources import (
    NAMESPACES,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, NAMESPACES)
    runner.run()


if __name__ == "__main__":
    main()
