#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_plugin_info
short_description: Read a Nomad CSI plugin
description:
  - Returns the provider, controller and node health of a single CSI plugin.
  - A plugin that is not registered is reported with O(exists=false) rather than as a failure.
options:
  plugin_id:
    description:
      - ID of the plugin.
    type: str
    required: true
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: Read the EBS plugin
  nomad.cluster.nomad_plugin_info:
    address: http://127.0.0.1:4646
    plugin_id: aws-ebs0
  register: plugin
"""

RETURN = r"""
id:
  description: The plugin ID, or an empty string when it is not registered.
  returned: always
  type: str
exists:
  description: Whether the plugin is registered.
  returned: always
  type: bool
plugin_id:
  description: ID of the plugin.
  returned: when exists
  type: str
plugin_provider:
  description: Name of the storage provider.
  returned: when exists
  type: str
plugin_provider_version:
  description: Version of the storage provider.
  returned: when exists
  type: str
controller_required:
  description: Whether the plugin requires a controller.
  returned: when exists
  type: bool
controllers_expected:
  description: Number of controllers the plugin runs.
  returned: when exists
  type: int
controllers_healthy:
  description: Number of healthy controllers.
  returned: when exists
  type: int
nodes_expected:
  description: Number of nodes the node plugin runs on.
  returned: when exists
  type: int
nodes_healthy:
  description: Number of healthy node plugins.
  returned: when exists
  type: int
nodes:
  description: Health of the node plugin on each node, sorted by node ID.
  returned: when exists
  type: list
  elements: dict
  contains:
    name:
      description: Node ID.
      type: str
    healthy:
      description: Whether the node plugin is healthy.
      type: bool
    healthy_description:
      description: Human-readable description of the health.
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
    PLUGIN,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(plugin_id=dict(type="str", required=True)),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, PLUGIN)
    runner.run()


if __name__ == "__main__":
    main()
