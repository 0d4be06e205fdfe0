import json
from unittest.mock import MagicMock, patch

import pytest

from ansible_collections.nomad.cluster.plugins.module_utils.nomad.client import (
    NomadClient,
    nomad_argument_spec,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.errors import (
    NomadAPIError,
)
from tests.unit.helpers import make_module

FETCH_URL = "ansible_collections.nomad.cluster.plugins.module_utils.nomad.client.fetch_url"


def _response(body):
    response = MagicMock()
    response.read.return_value = body
    return response


class TestArgumentSpec:
    def test_connection_options_and_module_options(self):
        spec = nomad_argument_spec(prefix=dict(type="str"))

        assert spec["address"]["required"] is True
        assert spec["secret_id"]["no_log"] is True
        assert spec["ca_path"]["aliases"] == ["ca_file"]
        assert spec["timeout"]["default"] == 30
        assert spec["prefix"] == dict(type="str")


class TestBuildUrl:
    def test_strips_trailing_slash_and_encodes_params(self):
        client = NomadClient(make_module(address="http://nomad:4646/"))

        url = client.build_url("/v1/volumes", query_params={"type": "csi", "node_id": None})

        assert url == "http://nomad:4646/v1/volumes?type=csi"

    def test_region_is_sent_first(self):
        client = NomadClient(make_module(region="eu"))

        url = client.build_url("/v1/acl/policies", query_params={"prefix": "team-"})

        assert url == "http://127.0.0.1:4646/v1/acl/policies?region=eu&prefix=team-"

    def test_path_params_are_quoted(self):
        client = NomadClient(make_module())

        url = client.build_url("/v1/acl/policy/{key}", path_params={"key": "a/b c"})

        assert url == "http://127.0.0.1:4646/v1/acl/policy/a%2Fb%20c"

    def test_missing_path_param(self):
        client = NomadClient(make_module())

        with pytest.raises(NomadAPIError, match="Missing required path parameter"):
            client.build_url("/v1/acl/role/{key}", path_params={"id": "r1"})

    def test_bools_are_lowercase(self):
        client = NomadClient(make_module())

        assert client.build_url("/v1/x", query_params={"stale": True}).endswith("?stale=true")


class TestSendRequest:
    @patch(FETCH_URL)
    def test_decodes_json_body(self, mock_fetch_url):
        mock_fetch_url.return_value = (_response(b'[{"Name": "ops"}]'), {"status": 200})
        module = make_module(secret_id="s3cr3t", timeout=5)
        client = NomadClient(module)

        result = client.get("/v1/acl/policies", query_params={"prefix": "o"})

        assert result == [{"Name": "ops"}]
        args, kwargs = mock_fetch_url.call_args
        assert args == (module, "http://127.0.0.1:4646/v1/acl/policies?prefix=o")
        assert kwargs["method"] == "GET"
        assert kwargs["data"] is None
        assert kwargs["timeout"] == 5
        assert kwargs["headers"]["X-Nomad-Token"] == "s3cr3t"

    @patch(FETCH_URL)
    def test_no_token_header_without_secret(self, mock_fetch_url):
        mock_fetch_url.return_value = (_response(b"[]"), {"status": 200})

        NomadClient(make_module()).get("/v1/regions")

        assert "X-Nomad-Token" not in mock_fetch_url.call_args.kwargs["headers"]

    @patch(FETCH_URL)
    def test_post_serializes_the_body(self, mock_fetch_url):
        mock_fetch_url.return_value = (_response(b'{"ID": "x"}'), {"status": 200})

        NomadClient(make_module()).post("/v1/jobs/parse", data={"JobHCL": "job {}"})

        kwargs = mock_fetch_url.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert json.loads(kwargs["data"]) == {"JobHCL": "job {}"}

    @patch(FETCH_URL)
    def test_error_status_carries_the_code(self, mock_fetch_url):
        mock_fetch_url.return_value = (None, {"status": 404, "body": b"ACL role not found"})

        with pytest.raises(NomadAPIError) as exc_info:
            NomadClient(make_module()).get("/v1/acl/role/{key}", path_params={"key": "r1"})

        assert exc_info.value.status_code == 404
        assert str(exc_info.value) == "Unexpected response code: 404 (ACL role not found)"

    @patch(FETCH_URL)
    def test_connection_failure_has_no_status(self, mock_fetch_url):
        mock_fetch_url.return_value = (None, {"status": -1, "msg": "Connection refused"})

        with pytest.raises(NomadAPIError) as exc_info:
            NomadClient(make_module()).get("/v1/regions")

        assert exc_info.value.status_code is None
        assert "Connection refused" in str(exc_info.value)

    @patch(FETCH_URL)
    def test_empty_body_is_none(self, mock_fetch_url):
        mock_fetch_url.return_value = (_response(b""), {"status": 200})

        assert NomadClient(make_module()).get("/v1/acl/policy/{key}", path_params={"key": "x"}) is None

    @patch(FETCH_URL)
    def test_invalid_json(self, mock_fetch_url):
        mock_fetch_url.return_value = (_response(b"<html>"), {"status": 200})

        with pytest.raises(NomadAPIError, match="not valid JSON"):
            NomadClient(make_module()).get("/v1/regions")
