import json
from unittest.mock import MagicMock

ADDRESS = "http://127.0.0.1:4646"


class AnsibleExitJson(Exception):
    """Raised in place of `module.exit_json` so a test can inspect the result."""

    def __init__(self, result):
        super().__init__(result)
        self.result = result


class AnsibleFailJson(Exception):
    """Raised in place of `module.fail_json` so a test can inspect the failure."""

    def __init__(self, result):
        super().__init__(result)
        self.result = result


def _exit_json(**kwargs):
    raise AnsibleExitJson(kwargs)


def _fail_json(**kwargs):
    raise AnsibleFailJson(kwargs)


def make_module(**params):
    """Builds a mocked AnsibleModule carrying the connection options plus `params`."""
    module = MagicMock()
    module.params = {
        "address": ADDRESS,
        "secret_id": None,
        "region": None,
        "ca_path": None,
        "client_cert": None,
        "client_key": None,
        "validate_certs": True,
        "timeout": 30,
    }
    module.params.update(params)
    module.exit_json.side_effect = _exit_json
    module.fail_json.side_effect = _fail_json
    module.jsonify.side_effect = json.dumps
    return module


class FakeClient:
    """Stands in for NomadClient: returns a canned response or raises a canned error."""

    address = ADDRESS

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def send_request(self, method, path, data=None, query_params=None, path_params=None):
        self.calls.append(
            {
                "method": method,
                "path": path,
                "data": data,
                "query_params": query_params,
                "path_params": path_params,
            }
        )
        if self.error is not None:
            raise self.error
        return self.response
