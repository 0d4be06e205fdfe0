import pytest

from ansible_collections.nomad.cluster.plugins.module_utils.nomad.classifier import (
    ABSENT,
    FAILURE,
    SUCCESS,
    Outcome,
    ResultClassifier,
)
from ansible_collections.nomad.cluster.plugins.module_utils.nomad.errors import (
    NomadAPIError,
)


def _raise(error):
    def call():
        raise error

    return call


class TestResultClassifier:
    def setup_method(self):
        self.classifier = ResultClassifier()

    def test_success_carries_the_value(self):
        outcome = self.classifier.classify(lambda: {"Name": "ops"})

        assert outcome.status == SUCCESS
        assert outcome.is_success
        assert outcome.value == {"Name": "ops"}
        assert outcome.error is None

    def test_none_value_is_still_success(self):
        assert self.classifier.classify(lambda: None).is_success

    def test_typed_404_is_absent(self):
        error = NomadAPIError("Unexpected response code: 404 (ACL role not found)", status_code=404)

        outcome = self.classifier.classify(_raise(error))

        assert outcome.status == ABSENT
        assert outcome.is_absent
        assert outcome.error is error

    def test_404_in_text_is_absent_without_a_status(self):
        outcome = self.classifier.classify(_raise(NomadAPIError("Unexpected response code: 404")))

        assert outcome.is_absent

    @pytest.mark.parametrize("status_code", [400, 403, 500, 503])
    def test_other_statuses_are_failures(self, status_code):
        error = NomadAPIError(f"Unexpected response code: {status_code}", status_code=status_code)

        outcome = self.classifier.classify(_raise(error))

        assert outcome.status == FAILURE
        assert outcome.is_failure
        assert outcome.error is error

    def test_typed_status_wins_over_text(self):
        error = NomadAPIError("Unexpected response code: 500 (node 404abc unreachable)", status_code=500)

        assert self.classifier.classify(_raise(error)).is_failure

    def test_connection_failure_is_a_failure(self):
        error = NomadAPIError("GET http://127.0.0.1:4646/v1/regions: Connection refused")

        assert self.classifier.classify(_raise(error)).is_failure

    def test_other_exceptions_propagate(self):
        with pytest.raises(KeyError):
            self.classifier.classify(_raise(KeyError("boom")))


class TestOutcome:
    def test_constructors(self):
        assert Outcome.success([]).value == []
        assert Outcome.absent().error is None
        assert not Outcome.failure(NomadAPIError("x")).is_success


class TestNotFoundText:
    def setup_method(self):
        self.classifier = ResultClassifier()

    @pytest.mark.parametrize(
        "message",
        [
            "GET http://127.0.0.1:4646/v1/acl/policy/team-404: Connection refused",
            "GET http://nomad-404.internal:4646/v1/regions: Name or service not known",
            "GET http://127.0.0.1:14040/v1/regions: timed out",
        ],
    )
    def test_connection_failure_mentioning_404_is_a_failure(self, message):
        outcome = self.classifier.classify(_raise(NomadAPIError(message)))

        assert outcome.is_failure

    def test_response_code_wording_is_absent(self):
        error = NomadAPIError("Unexpected response code: 404 (deployment not found)")

        assert self.classifier.is_not_found(error)
        assert not self.classifier.is_not_found(NomadAPIError("Unexpected response code: 4040"))
