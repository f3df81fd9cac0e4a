"""Exception hierarchy for apiguide.

Each error carries the HTTP status it maps to and a short, human-readable
``error`` message. ``message`` holds upstream detail when there is any.
"""


class APIGuideError(Exception):
    """Base class for all apiguide errors."""

    status_code: int = 500

    def __init__(self, error: str, message: str | None = None) -> None:
        super().__init__(error if message is None else f"{error}: {message}")
        self.error = error
        self.message = message

    def to_dict(self) -> dict[str, str]:
        payload = {"error": self.error}
        if self.message:
            payload["message"] = self.message
        return payload


class ValidationError(APIGuideError):
    """A required input is missing or malformed."""

    status_code = 400


class AuthError(APIGuideError):
    """A credential is missing or was rejected by the completion service."""

    status_code = 401


class AcquisitionError(APIGuideError):
    """Every acquisition strategy failed for the requested URL."""

    status_code = 400


class UpstreamError(APIGuideError):
    """The completion service or extractor returned an error or unusable output."""

    status_code = 500


class ExtractorError(UpstreamError):
    """The managed extractor reported an error or returned no usable content."""


class InsufficientCreditsError(ExtractorError):
    """The managed extractor account has run out of credits (HTTP 402)."""
