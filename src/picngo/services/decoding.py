"""Cleaning and decoding of model output into typed records."""

from pydantic import ValidationError

from picngo.domain.analysis import AnalysisKind, AnalysisRecord
from picngo.errors import DecodeFailureError

CODE_FENCE = "```"
RAW_PREFIX_LENGTH = 150


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence, if any.

    Unfenced text is returned unchanged. For fenced text the opening fence
    line (including an optional language tag) and the closing fence are
    dropped and the remaining content is trimmed.
    """
    cleaned = text.strip()
    if not cleaned.startswith(CODE_FENCE) and not cleaned.endswith(CODE_FENCE):
        return text
    if cleaned.startswith(CODE_FENCE):
        _, _, cleaned = cleaned.partition("\n")
        cleaned = cleaned.strip()
    if cleaned.endswith(CODE_FENCE):
        cleaned = cleaned[: -len(CODE_FENCE)].strip()
    return cleaned


def decode_analysis(text: str, kind: AnalysisKind) -> AnalysisRecord:
    """Validate cleaned text as JSON for the record type of ``kind``."""
    try:
        return kind.record_type.model_validate_json(text)
    except ValidationError as exc:
        raise DecodeFailureError(kind.label, text[:RAW_PREFIX_LENGTH]) from exc
