class NomadModuleError(Exception):
    """Base class for every error raised by the Nomad facts runners."""


class ValidationError(NomadModuleError):
    """A module input is outside its allowed values, or a required key is missing."""


class NomadAPIError(NomadModuleError):
    """
    A request to the Nomad HTTP API did not succeed.

    The message mirrors the text produced by Nomad's own client
    (`Unexpected response code: 404 (ACL policy not found)`). `status_code` is
    the HTTP status when one was received, and `None` for connection-level
    failures.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SerializationError(NomadModuleError):
    """A value could not be rendered into the text form its field requires."""


class StateWriteError(NomadModuleError):
    """A flattened value was rejected by the output state."""
