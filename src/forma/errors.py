"""Error types for forma.

Every error that reaches a caller carries the HTTP status code it maps to, so
the web layer can translate it without inspecting the error kind.
"""


class FormaError(Exception):
    """Base class for errors surfaced to callers."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_dict(self) -> dict:
        return {"error": self.message}


class ConfigurationError(FormaError):
    """Required configuration (e.g. API keys) is missing."""

    status_code = 500


class InputValidationError(FormaError):
    """A required request field is missing or empty."""

    status_code = 400


class UnsupportedFileError(InputValidationError):
    """An uploaded document is of a type ingest cannot read."""


class CatalogEmptyError(FormaError):
    """No catalog rows matched the requested equipment."""

    status_code = 404


class CapacityExhaustedError(FormaError):
    """Every credential in the pool was rate limited."""

    status_code = 429


class UpstreamRateLimitError(FormaError):
    """The model provider rate limited a single-key call."""

    status_code = 429


class MalformedResponseError(FormaError):
    """The model returned something that is not the JSON we asked for."""

    status_code = 500


class StorageError(FormaError):
    """The catalog store rejected a read or write."""

    status_code = 500
