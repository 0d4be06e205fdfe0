import json
from datetime import datetime, timezone
from enum import Enum

import pytest

from ansible_collections.nomad.cluster.plugins.module_utils.nomad.errors import (
    SerializationError,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.flattener import (
    Field,
    Flattener,
    ScalarFlattener,
    as_bool_text,
    as_count,
    as_decimal_text,
    as_duration_text,
    as_enum_text,
    as_flat_map,
    as_json_text,
    as_raw_timestamp,
    as_utc_timestamp,
    keyed_records,
    lookup,
    map_of,
    omit_zero,
    projected_map,
    record_set,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.resources import (
    ACL_TOKENS,
    DEPLOYMENTS,
)


class AccessMode(Enum):
    SINGLE_NODE_WRITER = "single-node-writer"


class TestLookup:
    def test_dotted_path(self):
        obj = {"SchedulerConfig": {"PreemptionConfig": {"BatchSchedulerEnabled": True}}}

        assert lookup(obj, "SchedulerConfig.PreemptionConfig.BatchSchedulerEnabled") is True

    def test_missing_levels_yield_none(self):
        assert lookup({"SchedulerConfig": None}, "SchedulerConfig.SchedulerAlgorithm") is None
        assert lookup({}, "A.B.C") is None

    def test_none_source_returns_the_object(self):
        assert lookup("global", None) == "global"


class TestRenderers:
    def test_enum_text(self):
        assert as_enum_text(AccessMode.SINGLE_NODE_WRITER) == "single-node-writer"
        assert as_enum_text("multi-node-reader-only") == "multi-node-reader-only"

    def test_decimal_text(self):
        assert as_decimal_text(3) == "3"
        with pytest.raises(SerializationError):
            as_decimal_text("three")

    @pytest.mark.parametrize(
        "nanos, expected",
        [
            (0, "0s"),
            (500 * 10**6, "500ms"),
            (1500 * 10**6, "1.5s"),
            (90 * 10**9, "1m30s"),
            (3600 * 10**9, "1h0m0s"),
            (-30 * 10**9, "-30s"),
        ],
    )
    def test_duration_text(self, nanos, expected):
        assert as_duration_text(nanos) == expected

    def test_duration_text_keeps_text(self):
        assert as_duration_text("1h0m0s") == "1h0m0s"

    def test_flat_map(self):
        assert as_flat_map({"owner": "ops", "tier": 1}) == {"owner": "ops", "tier": 1}

    def test_flat_map_rejects_nested_values(self):
        with pytest.raises(SerializationError, match="nested value under 'labels'"):
            as_flat_map({"labels": {"team": "ops"}})

    def test_projected_map_has_exactly_the_mapped_keys(self):
        render = projected_map({"batch": "Batch", "system": "System"}, default=False)

        assert render({"Batch": True, "Extra": True}) == {"batch": True, "system": False}

    def test_json_text_sorted_and_compact(self):
        render = as_json_text()

        assert render({"b": 1, "a": [1, 2]}) == '{"a":[1,2],"b":1}'

    def test_json_text_keeps_api_order(self):
        render = as_json_text(sort_keys=False)

        assert list(json.loads(render({"Name": "x", "ID": "x"}))) == ["Name", "ID"]

    def test_json_text_rejects_unencodable_values(self):
        with pytest.raises(SerializationError):
            as_json_text()({"when": object()})

    def test_record_set_dedupes_and_sorts(self):
        render = record_set({"name": "Name"})

        records = render([{"Name": "ops"}, {"Name": "dev"}, {"Name": "ops", "ID": "p1"}])

        assert records == [{"name": "dev"}, {"name": "ops"}]

    def test_record_set_is_order_independent(self):
        render = record_set({"id": "ID", "name": "Name"})
        roles = [{"ID": "r2", "Name": "b"}, {"ID": "r1", "Name": "a"}]

        assert render(roles) == render(list(reversed(roles)))


class TestTimestamps:
    def test_utc_normalization(self):
        assert (
            as_utc_timestamp("2024-05-01T11:30:00.123456789+02:00")
            == "2024-05-01T09:30:00.123456+00:00"
        )

    def test_zulu_and_naive(self):
        assert as_utc_timestamp("2024-05-01T09:30:00Z") == "2024-05-01T09:30:00+00:00"
        assert as_utc_timestamp(datetime(2024, 5, 1, 9, 30)) == "2024-05-01T09:30:00+00:00"

    def test_short_fraction_is_padded(self):
        assert as_utc_timestamp("2024-05-01T09:30:00.5Z") == "2024-05-01T09:30:00.500000+00:00"

    def test_invalid_timestamp(self):
        with pytest.raises(SerializationError, match="invalid timestamp"):
            as_utc_timestamp("yesterday")

    def test_raw_timestamp_is_untouched(self):
        raw = "2024-05-01T11:30:00.123456789+02:00"

        assert as_raw_timestamp(raw) == raw
        assert (
            as_raw_timestamp(datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc))
            == "2024-05-01T09:30:00+00:00"
        )


class TestField:
    def test_missing_value_renders_zero_value(self):
        assert Field("name", "Name").extract({}) == ""
        assert Field("global", "Global", type=bool).extract({}) is False
        assert Field("policies", "Policies", type=list).extract({"Policies": None}) == []
        assert Field("meta", "Meta", as_flat_map, dict).extract({}) == {}

    def test_render_error_names_the_field(self):
        field = Field("target", "Target", as_flat_map, dict)

        with pytest.raises(SerializationError, match="field 'target'"):
            field.extract({"Target": {"Job": {"Name": "web"}}})


class TestFlattener:
    def test_records_share_fields_and_order(self):
        flattener = ACL_TOKENS.flattener()
        tokens = [
            {"AccessorID": "a1", "Name": "ci", "Type": "client", "Policies": ["b", "a"]},
            {"AccessorID": "a2", "Global": True, "CreateTime": "2024-05-01T09:30:00Z"},
        ]

        records = flattener.flatten_all(tokens)

        assert len(records) == len(tokens)
        for record in records:
            assert tuple(record) == flattener.field_names
        assert records[0]["policies"] == ["b", "a"]
        assert records[0]["global"] is False
        assert records[1]["name"] == ""
        assert records[1]["create_time"] == "2024-05-01T09:30:00Z"

    def test_flatten_all_of_none(self):
        assert DEPLOYMENTS.flattener().flatten_all(None) == []

    def test_deployment_record(self):
        record = DEPLOYMENTS.flattener().flatten(
            {"ID": "d1", "JobID": "web", "JobVersion": 3, "Status": "running"}
        )

        assert record == {
            "ID": "d1",
            "JobID": "web",
            "JobVersion": "3",
            "Status": "running",
            "StatusDescription": "",
        }

    def test_scalar_flattener(self):
        flattener = ScalarFlattener(Field("name", "Name"))

        assert flattener.flatten_all([{"Name": "default"}, {"Name": "prod"}]) == ["default", "prod"]
        assert Flattener(()).flatten({"Name": "x"}) == {}


class TestContainerRenderers:
    def test_bool_text_and_count(self):
        assert as_bool_text(True) == "true"
        assert as_bool_text(False) == "false"
        assert as_count({"c1": {}, "c2": {}}) == 2
        with pytest.raises(SerializationError):
            as_count(3)

    def test_omit_zero(self):
        render = omit_zero(as_duration_text)

        assert render(0) == ""
        assert render(24 * 3600 * 10**9) == "24h0m0s"

    def test_map_of(self):
        render = map_of(projected_map({"desired_total": "DesiredTotal"}))

        assert render({"web": {"DesiredTotal": 3}, "db": {}}) == {
            "web": {"desired_total": 3},
            "db": {"desired_total": None},
        }
        with pytest.raises(SerializationError):
            render(["web"])

    def test_keyed_records_are_sorted_by_key(self):
        render = keyed_records("name", {"healthy": "Healthy"})

        assert render({"n2": {"Healthy": False}, "n1": {"Healthy": True}}) == [
            {"name": "n1", "healthy": True},
            {"name": "n2", "healthy": False},
        ]


class TestFieldZero:
    def test_zero_overrides_the_type_zero_value(self):
        field = Field("controller_required", "ControllerRequired", as_bool_text, zero="false")

        assert field.extract({}) == "false"
        assert field.extract({"ControllerRequired": True}) == "true"

    def test_zero_map_is_copied_per_record(self):
        field = Field("flags", "Flags", projected_map({"a": "A"}, default=False), dict, zero={"a": False})

        first = field.extract({})
        first["a"] = True

        assert field.extract({}) == {"a": False}
