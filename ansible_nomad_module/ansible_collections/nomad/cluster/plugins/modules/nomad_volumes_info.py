#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_volumes_info
short_description: List Nomad storage volumes
description:
  - Returns the volumes of one namespace, optionally limited to a node or a plugin.
options:
  type:
    description:
      - Volume type. Only CSI volumes are supported.
    type: str
    choices: [csi]
    default: csi
  node_id:
    description:
      - Only return volumes claimed on this node.
    type: str
  plugin_id:
    description:
      - Only return volumes managed by this plugin.
    type: str
  namespace:
    description:
      - Namespace to list volumes from.
    type: str
    default: default
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: List the CSI volumes on a node
  nomad.cluster.nomad_volumes_info:
    address: http://127.0.0.1:4646
    node_id: 0bb4b3a1-9c8d-7a64-19b5-a0f7e9f8b1c2
  register: result
"""

RETURN = r"""
id:
  description: Identity of the read, derived from the agent address and the API path.
  returned: always
  type: str
  sample: http://127.0.0.1:4646/v1/volumes
exists:
  description: Whether the listing exists.
  returned: always
  type: bool
volumes:
  description: The matching volumes, in the order returned by Nomad.
  returned: when exists
  type: list
  elements: dict
  contains:
    ID:
      description: Volume ID.
      type: str
    ExternalID:
      description: ID of the volume in the storage provider.
      type: str
    Namespace:
      description: Namespace of the volume.
      type: str
    Name:
      description: Display name of the volume.
      type: str
    AccessMode:
      description: Access mode, e.g. C(single-node-writer).
      type: str
    AttachmentMode:
      description: Attachment mode, C(file-system) or C(block-device).
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
    VOLUMES,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(
            type=dict(type="str", choices=["csi"], default="csi"),
            node_id=dict(type="str"),
            plugin_id=dict(type="str"),
            namespace=dict(type="str", default="default"),
        ),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, VOLUMES)
    runner.run()


if __name__ == "__main__":
    main()
