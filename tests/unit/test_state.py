from unittest.mock import MagicMock

import pytest

from ansible_collections.nomad.cluster.plugins.module_utils.nomad.errors import (
    StateWriteError,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.state import (
    FieldCommitter,
    OutputState,
)


class TestOutputState:
    def setup_method(self):
        self.state = OutputState({"name": str, "min": int, "enabled": bool, "meta": dict})

    def test_accepts_declared_fields(self):
        self.state.set("name", "ops")
        self.state.set("min", 1)
        self.state.set("enabled", True)
        self.state.set("meta", None)

        assert self.state.as_dict() == {"name": "ops", "min": 1, "enabled": True, "meta": None}

    def test_rejects_undeclared_field(self):
        with pytest.raises(StateWriteError, match="'rules' is not a declared field."):
            self.state.set("rules", "")

    def test_rejects_wrong_type(self):
        with pytest.raises(StateWriteError, match="'min' expects int, got str."):
            self.state.set("min", "1")

    def test_bool_is_not_an_int(self):
        with pytest.raises(StateWriteError):
            self.state.set("min", True)

    def test_as_dict_is_a_copy(self):
        self.state.set("name", "ops")
        self.state.as_dict()["name"] = "changed"

        assert self.state.values["name"] == "ops"


class TestFieldCommitter:
    def test_first_error_wins_and_every_write_is_attempted(self):
        first, second = ValueError("k2 rejected"), ValueError("k4 rejected")
        sink = MagicMock()
        sink.set.side_effect = [None, first, None, second, None]
        committer = FieldCommitter(sink)

        committer.commit_all({"k1": 1, "k2": 2, "k3": 3, "k4": 4, "k5": 5})

        assert committer.finalize() is first
        assert sink.set.call_count == 5
        assert [name for name, _ in committer.attempts] == ["k1", "k2", "k3", "k4", "k5"]

    def test_no_error(self):
        state = OutputState({"name": str})
        committer = FieldCommitter(state)

        committer.commit("name", "ops")

        assert committer.finalize() is None
        assert state.as_dict() == {"name": "ops"}

    def test_values_after_a_rejected_write_are_kept(self):
        state = OutputState({"min": int, "max": int})
        committer = FieldCommitter(state)

        committer.commit_all({"min": "one", "max": 5})

        assert isinstance(committer.finalize(), StateWriteError)
        assert state.as_dict() == {"max": 5}
