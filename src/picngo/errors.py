"""Errors raised while preparing, sending, or decoding an analysis."""


class AnalysisError(Exception):
    """Base error for a failed analysis request."""

    kind = "analysis_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingCredentialError(AnalysisError):
    """Raised when no API key is configured."""

    kind = "missing_credential"

    def __init__(
        self,
        message: str = "API key is not set. Add your OpenAI API key in settings.",
    ) -> None:
        super().__init__(message)


class ImageEncodingError(AnalysisError):
    """Raised when the image cannot be converted for upload."""

    kind = "image_encoding"

    def __init__(self, message: str = "Failed to process the image.") -> None:
        super().__init__(message)


class TransportFailureError(AnalysisError):
    """Raised when the request could not be sent or timed out."""

    kind = "transport"

    def __init__(self, detail: str) -> None:
        super().__init__(f"Could not reach the analysis service: {detail}")
        self.detail = detail


class HttpStatusError(AnalysisError):
    """Raised for a non-2xx response from the inference API."""

    kind = "http_error"

    def __init__(self, status_code: int, server_message: str | None = None) -> None:
        if server_message:
            message = f"API error: {server_message}"
        else:
            message = (
                f"Server returned HTTP {status_code}. Please verify your API key."
            )
        super().__init__(message)
        self.status_code = status_code
        self.server_message = server_message


class MalformedResponseError(AnalysisError):
    """Raised when a successful response lacks the expected fields."""

    kind = "malformed_response"

    def __init__(self, message: str = "Unexpected response format from API.") -> None:
        super().__init__(message)


class DecodeFailureError(AnalysisError):
    """Raised when model output does not match the expected JSON shape."""

    kind = "decode_failure"

    def __init__(self, label: str, raw_prefix: str) -> None:
        super().__init__(f"Could not parse {label}. Raw: {raw_prefix}")
        self.label = label
        self.raw_prefix = raw_prefix
