import json
from urllib.parse import quote, urlencode

from ansible.module_utils.basic import AnsibleModule, env_fallback
from ansible.module_utils.urls import fetch_url

from ansible_collections.nomad.cluster.plugins.module_utils.nomad.errors import (
    NomadAPIError,
)


def nomad_argument_spec(**kwargs) -> dict:
    """
    Returns the connection options shared by every Nomad module, merged with
    the module-specific options given as keyword arguments.
    """
    spec = dict(
        address=dict(
            type="str", required=True, fallback=(env_fallback, ["NOMAD_ADDR"])
        ),
        secret_id=dict(
            type="str", no_log=True, fallback=(env_fallback, ["NOMAD_TOKEN"])
        ),
        region=dict(type="str", fallback=(env_fallback, ["NOMAD_REGION"])),
        ca_path=dict(
            type="path", aliases=["ca_file"], fallback=(env_fallback, ["NOMAD_CACERT"])
        ),
        client_cert=dict(
            type="path",
            aliases=["cert_file"],
            fallback=(env_fallback, ["NOMAD_CLIENT_CERT"]),
        ),
        client_key=dict(
            type="path",
            aliases=["key_file"],
            no_log=False,
            fallback=(env_fallback, ["NOMAD_CLIENT_KEY"]),
        ),
        validate_certs=dict(type="bool", default=True),
        timeout=dict(type="int", default=30),
    )
    spec.update(kwargs)
    return spec


class NomadClient:
    """
    A thin, read-only client for the Nomad HTTP API built on Ansible's
    `fetch_url`.

    Unlike the generic request helpers that fail the module directly, this
    client raises `NomadAPIError` so that callers can decide whether a failed
    call means "not found" or a genuine failure.
    """

    def __init__(self, module: AnsibleModule):
        self.module = module
        self.address = module.params["address"].rstrip("/")

    def get(self, path, query_params=None, path_params=None):
        return self.send_request(
            "GET", path, query_params=query_params, path_params=path_params
        )

    def post(self, path, data=None, query_params=None, path_params=None):
        return self.send_request(
            "POST",
            path,
            data=data,
            query_params=query_params,
            path_params=path_params,
        )

    def build_url(self, path, query_params=None, path_params=None) -> str:
        """
        Builds the full request URL from the agent address, the API path and
        the query parameters. Path parameters are percent-encoded before they
        are formatted into the path; unset query parameters are dropped.
        """
        if path_params:
            try:
                path = path.format(
                    **{key: quote(str(value), safe="") for key, value in path_params.items()}
                )
            except KeyError as e:
                raise NomadAPIError(f"Missing required path parameter in API call: {e}")

        url = f"{self.address}/{path.lstrip('/')}"

        params = {}
        if self.module.params.get("region"):
            params["region"] = self.module.params["region"]
        params.update(query_params or {})

        encoded_params = []
        for key, value in params.items():
            if value is None or value == "":
                continue
            if isinstance(value, bool):
                value = str(value).lower()
            encoded_params.append((key, value))
        if encoded_params:
            url += "?" + urlencode(encoded_params)
        return url

    def send_request(
        self, method, path, data=None, query_params=None, path_params=None
    ):
        """
        Sends one request and returns the decoded JSON body, or `None` for an
        empty body.

        Raises:
            NomadAPIError: the agent could not be reached, answered with a
                status >= 400, or returned a body that is not valid JSON.
        """
        url = self.build_url(path, query_params=query_params, path_params=path_params)

        if data is not None and not isinstance(data, str):
            data = self.module.jsonify(data)

        headers = {"Content-Type": "application/json"}
        if self.module.params.get("secret_id"):
            headers["X-Nomad-Token"] = self.module.params["secret_id"]

        response, info = fetch_url(
            self.module,
            url,
            data=data,
            headers=headers,
            method=method,
            timeout=self.module.params.get("timeout") or 30,
            ca_path=self.module.params.get("ca_path"),
        )

        status_code = info["status"]

        # fetch_url reports connection-level failures with a status of -1.
        if status_code < 0:
            raise NomadAPIError(f"{method} {url}: {info.get('msg')}")

        if status_code >= 400:
            error_body = info.get("body") or b""
            if isinstance(error_body, bytes):
                error_body = error_body.decode(errors="ignore")
            raise NomadAPIError(
                f"Unexpected response code: {status_code} ({error_body.strip()})",
                status_code=status_code,
            )

        body_content = response.read() if response else None
        if not body_content:
            return None

        try:
            return json.loads(body_content)
        except json.JSONDecodeError:
            raise NomadAPIError(
                f"API returned a success status ({status_code}) but the response was not valid JSON.",
                status_code=status_code,
            )
