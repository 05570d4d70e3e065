import json

from smartdocs.llm.exceptions import LlmResponseError


def parse_json_object(raw: str) -> dict[str, object]:
    """Parse a model reply into a JSON object.

    Markdown code fences are stripped first. Models without a JSON response
    mode sometimes wrap the object in prose, so as a last resort the text
    between the first ``{`` and the last ``}`` is parsed.

    Raises:
        LlmResponseError: if no JSON object can be recovered.
    """
    cleaned = _strip_code_fences(raw.strip())
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        start, end = cleaned.find("{"), cleaned.rfind("}")
        if start == -1 or end <= start:
            raise LlmResponseError(f"Invalid JSON response: {exc}") from exc
        try:
            parsed = json.loads(cleaned[start : end + 1])
        except json.JSONDecodeError as inner:
            raise LlmResponseError(f"Invalid JSON response: {inner}") from inner

    if not isinstance(parsed, dict):
        raise LlmResponseError("JSON response must be an object")
    return parsed


def _strip_code_fences(text: str) -> str:
    if not text.startswith("```"):
        return text
    lines = text.splitlines()
    if lines and lines[0].startswith("```"):
        lines = lines[1:]
    if lines and lines[-1].strip() == "```":
        lines = lines[:-1]
    return "\n".join(lines)
