class ModuleDocFragment:
    DOCUMENTATION = r"""
options:
  address:
    description:
      - URL of the root of the target Nomad agent, e.g. C(http://127.0.0.1:4646).
      - If not set, the value of the E(NOMAD_ADDR) environment variable is used.
    type: str
    required: true
  secret_id:
    description:
      - ACL token sent with every request in the C(X-Nomad-Token) header.
      - If not set, the value of the E(NOMAD_TOKEN) environment variable is used.
    type: str
  region:
    description:
      - Region of the target Nomad agent.
      - If not set, the value of the E(NOMAD_REGION) environment variable is used.
    type: str
  ca_path:
    description:
      - Path to a PEM-encoded certificate authority used to verify the agent's certificate.
      - If not set, the value of the E(NOMAD_CACERT) environment variable is used.
    type: path
    aliases: [ca_file]
  client_cert:
    description:
      - Path to a PEM-encoded client certificate presented to the agent. Requires O(client_key).
      - If not set, the value of the E(NOMAD_CLIENT_CERT) environment variable is used.
    type: path
    aliases: [cert_file]
  client_key:
    description:
      - Path to the PEM-encoded private key of O(client_cert).
      - If not set, the value of the E(NOMAD_CLIENT_KEY) environment variable is used.
    type: path
    aliases: [key_file]
  validate_certs:
    description:
      - Whether to verify the agent's TLS certificate.
    type: bool
    default: true
  timeout:
    description:
      - Timeout in seconds for the request to the Nomad API.
    type: int
    default: 30
notes:
  - The module never changes cluster state and supports check mode.
"""
