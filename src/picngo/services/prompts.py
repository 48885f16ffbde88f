"""Prompt and message construction for analysis requests."""

import base64

from picngo.domain.settings import Language
from picngo.errors import ImageEncodingError

_FOOD_PROMPT = """\
Analyze this food image and respond with ONLY a valid JSON object. \
Do not use markdown, code fences, or any extra text.

Use exactly this structure:
{
  "food_name": "Name of the food or dish",
  "ingredients": ["ingredient 1", "ingredient 2", "ingredient 3"],
  "calories_estimate": "approximately X-Y calories per serving",
  "health_rating": "Healthy",
  "health_assessment": "A concise 1-2 sentence assessment of the nutritional \
value and health impact.",
  "tips": ["Practical health tip 1", "Practical health tip 2"]
}

All values are strings except "ingredients" and "tips", which are arrays of \
strings.
For health_rating use ONLY one of: "Healthy", "Moderate", or "Unhealthy".
If the image is not food, set food_name to "Not food detected" and explain \
briefly in health_assessment."""

_INGREDIENT_PROMPT = """\
You are a nutritionist. Analyze the food ingredient "{name}" and respond with \
ONLY a valid JSON object. Do not use markdown, code fences, or any extra text:
{{
  "what_it_is": "A clear 1-2 sentence description of what this ingredient is",
  "nutritional_highlights": ["Key nutrient 1 with brief note", "Key nutrient 2", \
"Key nutrient 3"],
  "health_benefits": ["Specific benefit 1", "Specific benefit 2", \
"Specific benefit 3"],
  "health_concerns": ["Concern 1, or write 'Generally safe in normal amounts' \
if there are none"],
  "recommended_amount": "Recommended daily or per-meal amount for a healthy adult"
}}
"what_it_is" and "recommended_amount" are strings; the other fields are arrays \
of strings."""


def food_analysis_prompt(language: Language) -> str:
    """Return the instruction text for a food photo analysis."""
    return f"{_FOOD_PROMPT}\n{language.prompt_instruction}"


def ingredient_analysis_prompt(name: str, language: Language) -> str:
    """Return the instruction text for an ingredient lookup."""
    prompt = _INGREDIENT_PROMPT.format(name=name.strip())
    return f"{prompt}\n{language.prompt_instruction}"


def food_analysis_messages(
    image_bytes: bytes, language: Language
) -> list[dict[str, object]]:
    """Build a single multimodal user message with the image and instructions."""
    return [
        {
            "role": "user",
            "content": [
                {"type": "image_url", "image_url": {"url": to_data_url(image_bytes)}},
                {"type": "text", "text": food_analysis_prompt(language)},
            ],
        }
    ]


def ingredient_analysis_messages(
    name: str, language: Language
) -> list[dict[str, object]]:
    """Build a single text-only user message for an ingredient lookup."""
    return [{"role": "user", "content": ingredient_analysis_prompt(name, language)}]


def to_data_url(image_bytes: bytes) -> str:
    """Convert image bytes to a base64 data URL."""
    if not isinstance(image_bytes, bytes | bytearray) or not image_bytes:
        raise ImageEncodingError()
    mime_type = _detect_mime_type(bytes(image_bytes))
    encoded = base64.b64encode(image_bytes).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer an image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    if image_bytes[4:8] == b"ftyp" and image_bytes[8:12] in {b"heic", b"heix"}:
        return "image/heic"
    return "image/jpeg"
