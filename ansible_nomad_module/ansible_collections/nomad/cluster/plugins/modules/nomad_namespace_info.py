#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_namespace_info
short_description: Read a Nomad namespace
description:
  - Returns the description, quota and metadata of a single namespace.
  - A namespace that does not exist is reported with O(exists=false) rather than as a failure.
options:
  name:
    description:
      - Name of the namespace.
    type: str
    required: true
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: Read the prod namespace
  nomad.cluster.nomad_namespace_info:
    address: http://127.0.0.1:4646
    name: prod
  register: namespace
"""

RETURN = r"""
id:
  description: The namespace name, or an empty string when it does not exist.
  returned: always
  type: str
exists:
  description: Whether the namespace exists.
  returned: always
  type: bool
description:
  description: Description of the namespace.
  returned: when exists
  type: str
quota:
  description: Name of the quota attached to the namespace.
  returned: when exists
  type: str
meta:
  description: Metadata of the namespace.
  returned: when exists
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
    NAMESPACE,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(name=dict(type="str", required=True)),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, NAMESPACE)
    runner.run()


if __name__ == "__main__":
    main()
