#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_plugins_info
short_description: List Nomad CSI plugins
description:
  - Returns every registered CSI plugin with its controller and node health counts.
options:
  type:
    description:
      - Type of plugin to list. Only C(csi) is supported.
    type: str
    choices: [csi]
    default: csi
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: List CSI plugins
  nomad.cluster.nomad_plugins_info:
    address: http://127.0.0.1:4646
  register: result
"""

RETURN = r"""
id:
  description: Identity of the read, derived from the agent address and the API path.
  returned: always
  type: str
  sample: http://127.0.0.1:4646/v1/plugins
exists:
  description: Whether the listing exists.
  returned: always
  type: bool
plugins:
  description: The registered plugins. Flags and counts are reported as text.
  returned: when exists
  type: list
  elements: dict
  contains:
    id:
      description: Plugin ID.
      type: str
    provider:
      description: Name of the storage provider.
      type: str
    controller_required:
      description: Whether the plugin requires a controller, as C(true) or C(false).
      type: str
    controllers_healthy:
      description: Number of healthy controllers.
      type: str
    controllers_expected:
      description: Number of expected controllers.
      type: str
    nodes_healthy:
      description: Number of healthy node plugins.
      type: str
    nodes_expected:
      description: Number of expected node plugins.
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
    PLUGINS,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(type=dict(type="str", choices=["csi"], default="csi")),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, PLUGINS)
    runner.run()


if __name__ == "__main__":
    main()
