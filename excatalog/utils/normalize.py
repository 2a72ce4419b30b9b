from typing import Mapping, TypeVar

from excatalog.utils import taxonomy

T = TypeVar("T")


class InvalidRowError(ValueError):
    """Raised when a row can't become a record (e.g. a required field is blank)."""

    pass


def require_text(value: str | None, field: str) -> str:
    cleaned = (value or "").strip()
    if not cleaned:
        raise InvalidRowError(f"{field} is empty")
    return cleaned


def split_list(value: str | None, separator: str) -> tuple[str, ...]:
    """
    Split on `separator`, trim each part and drop empties.
    Example: " a | | b " with "|" -> ("a", "b")
    """
    if not value or not value.strip():
        return ()
    return tuple(part.strip() for part in value.split(separator) if part.strip())


def parse_video_links(value: str | None) -> tuple[str, ...]:
    return split_list(value, ",")


def parse_instructions(value: str | None) -> tuple[str, ...]:
    return split_list(value, "|")


def parse_label(value: str | None, labels: tuple[str, ...], default: T) -> str | T:
    """
    Exact, case-sensitive match against `labels`.
    Empty input, the "-" sentinel and unknown labels all give `default`.
    """
    cleaned = (value or "").strip()
    if not cleaned or cleaned == taxonomy.SENTINEL:
        return default
    if cleaned in labels:
        return cleaned
    return default


def parse_difficulty(value: str | None) -> str:
    return parse_label(value, taxonomy.DIFFICULTIES, taxonomy.DEFAULT_DIFFICULTY)


def parse_force(value: str | None) -> str | None:
    return parse_label(value, taxonomy.FORCES, None)


def parse_grip(value: str | None) -> str | None:
    return parse_label(value, taxonomy.GRIPS, None)


def parse_mechanic(value: str | None) -> str | None:
    return parse_label(value, taxonomy.MECHANICS, None)


def normalize_row(raw: Mapping[str, str]) -> dict:
    """
    Turn a header-labelled raw row into typed record fields (no id, no keywords).
    Missing columns read as empty strings.
    """
    return {
        "muscle_group": require_text(raw.get(taxonomy.COL_MUSCLE_GROUP), "muscle_group"),
        "name": require_text(raw.get(taxonomy.COL_NAME), "name"),
        "equipment": require_text(raw.get(taxonomy.COL_EQUIPMENT), "equipment"),
        "video_links": parse_video_links(raw.get(taxonomy.COL_VIDEO_LINKS)),
        "difficulty": parse_difficulty(raw.get(taxonomy.COL_DIFFICULTY)),
        "force": parse_force(raw.get(taxonomy.COL_FORCE)),
        "grip": parse_grip(raw.get(taxonomy.COL_GRIPS)),
        "mechanic": parse_mechanic(raw.get(taxonomy.COL_MECHANIC)),
        "instructions": parse_instructions(raw.get(taxonomy.COL_INSTRUCTIONS)),
    }
