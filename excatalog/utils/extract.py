import re
from typing import Iterable

# Applied in order. Parentheses go first so digits inside them can't be
# half-eaten by the set/rep patterns.
DEFAULT_ANNOTATION_PATTERNS: tuple[str, ...] = (
    r"\s*\([^)]*\)",  # (EZ bar), (3x10 paused)
    r"\s+\d+x\d+",  # 3x10
    r"\s+\d+\s*x\s*\d+",  # 3 x 10
    r"\s+\d+x\s*AMRAP",  # 3xAMRAP, 3x AMRAP
    r"\s+@\s*\d+(?:\.\d+)?\s*(?:lbs?|kgs?|pounds?|kilos?)?\b",  # @75lbs, @100kg, @75
    r"\s+\d+(?:\.\d+)?\s*(?:lbs?|kgs?|pounds?|kilos?)\b",  # 135 lbs
    r"\s+(?:sets?|reps?)\b",
)


class NameExtractor:
    """
    Strips set/rep/weight annotations from a workout line.

    "Dumbbell Press 4x12 @75lbs" -> "Dumbbell Press"

    Only whitespace is trimmed from the result; case and punctuation are left
    for the scorer.
    """

    def __init__(self, patterns: Iterable[str] = DEFAULT_ANNOTATION_PATTERNS):
        self.patterns: tuple[str, ...] = tuple(patterns)
        self._compiled = [re.compile(p, re.IGNORECASE) for p in self.patterns]

    def _strip_once(self, text: str) -> str:
        for pattern in self._compiled:
            text = pattern.sub("", text)
        return text

    def extract(self, text: str) -> str:
        # removing a word can expose a new match ("3 sets x 10" -> "3 x 10"),
        # so repeat until nothing changes. Every pass only removes characters.
        cleaned = text
        while True:
            stripped = self._strip_once(cleaned)
            if stripped == cleaned:
                return cleaned.strip()
            cleaned = stripped

    def __call__(self, text: str) -> str:
        return self.extract(text)


_default_extractor = NameExtractor()


def extract_exercise_name(text: str) -> str:
    return _default_extractor.extract(text)
