import re
from typing import Any, Callable, NamedTuple

from ansible_collections.nomad.cluster.plugins.module_utils.nomad.errors import (
    NomadAPIError,
)

SUCCESS = "success"
ABSENT = "absent"
FAILURE = "failure"


class Outcome(NamedTuple):
    """The classified result of one call to the Nomad API."""

    status: str
    value: Any = None
    error: NomadAPIError | None = None

    @classmethod
    def success(cls, value):
        return cls(SUCCESS, value=value)

    @classmethod
    def absent(cls, error=None):
        return cls(ABSENT, error=error)

    @classmethod
    def failure(cls, error):
        return cls(FAILURE, error=error)

    @property
    def is_success(self) -> bool:
        return self.status == SUCCESS

    @property
    def is_absent(self) -> bool:
        return self.status == ABSENT

    @property
    def is_failure(self) -> bool:
        return self.status == FAILURE


class ResultClassifier:
    """
    Classifies the outcome of an API call into success, absence or failure.

    Nomad reports a missing resource through the same error channel as any
    other failed request, so this is the one place that decides what counts
    as "not found".
    """

    not_found_status = 404
    not_found_text = re.compile(r"response code: 404\b")

    def classify(self, call: Callable[[], Any]) -> Outcome:
        """
        Runs `call` and classifies what happened. Only `NomadAPIError` is
        classified; any other exception propagates to the caller.
        """
        try:
            value = call()
        except NomadAPIError as e:
            if self.is_not_found(e):
                return Outcome.absent(e)
            return Outcome.failure(e)
        return Outcome.success(value)

    def is_not_found(self, error: NomadAPIError) -> bool:
        # The typed status wins when the client received one. Otherwise only
        # Nomad's own "response code" wording counts; a URL or key that merely
        # contains 404 does not.
        if error.status_code is not None:
            return error.status_code == self.not_found_status
        return self.not_found_text.search(str(error)) is not None
