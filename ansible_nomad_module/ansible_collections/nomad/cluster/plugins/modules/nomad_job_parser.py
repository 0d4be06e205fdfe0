#!/usr/bin/python

DOCUMENTATION = r"""
---
module: nomad_job_parser
short_description: Parse a Nomad job specification into JSON
description:
  - Sends an HCL job specification to the Nomad agent's parse endpoint and returns the parsed job as JSON text.
  - No job is registered.
options:
  hcl:
    description:
      - The HCL definition of the job.
    type: str
    required: true
  canonicalize:
    description:
      - Whether unset fields are populated with their default values.
    type: bool
    default: false
extends_documentation_fragment:
  - nomad.cluster.nomad
"""

EXAMPLES = r"""
- name: Parse a job file
  nomad.cluster.nomad_job_parser:
    address: http://127.0.0.1:4646
    hcl: "{{ lookup('file', 'example.nomad.hcl') }}"
    canonicalize: true
  register: parsed

- name: Show the job ID
  ansible.builtin.debug:
    msg: "{{ (parsed.json | from_json).ID }}"
"""

RETURN = r"""
id:
  description: The ID of the parsed job.
  returned: always
  type: str
exists:
  description: Whether the job was parsed.
  returned: always
  type: bool
json:
  description: The parsed job as compact JSON text.
  returned: success
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
    JOB_PARSER,
)


def main():
    module = AnsibleModule(
        argument_spec=nomad_argument_spec(
            hcl=dict(type="str", required=True),
            canonicalize=dict(type="bool", default=False),
        ),
        supports_check_mode=True,
    )
    runner = FactsRunner(module, JOB_PARSER)
    runner.run()


if __name__ == "__main__":
    main()
