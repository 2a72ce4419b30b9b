import re

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def slugify(text: str) -> str:
    """
    Lowercase, drop anything outside [a-z0-9 whitespace], hyphenate whitespace runs.
    Example: "Barbell Curl (EZ)" -> "barbell-curl-ez"
    """
    cleaned = _NON_SLUG_CHARS.sub("", text.lower())
    return _WHITESPACE.sub("-", cleaned)


def build_exercise_id(muscle_group: str, name: str) -> str:
    """
    Deterministic exercise id.
    Example: ("Biceps", "Barbell Curl") -> "biceps-barbell-curl"
    """
    return f"{slugify(muscle_group)}-{slugify(name)}"
