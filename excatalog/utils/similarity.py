EXACT = 1.0
WORD_ORDER = 0.95
CONTAINS = 0.9
ALL_WORDS = 0.8
PARTIAL_SCALE = 0.7


def _overlaps(word: str, others: list[str]) -> bool:
    return any(word in other or other in word for other in others)


def similarity(query: str, candidate: str) -> float:
    """
    Heuristic similarity between a cleaned query and a canonical name, in [0, 1].

    Tiers, first hit wins:
      1.0   identical (case-insensitive)
      0.9   one contains the other
      0.95  same words in a different order
      0.8   every word of one side overlaps a word of the other
      else  overlapping-word ratio * 0.7
    """
    s1 = query.lower()
    s2 = candidate.lower()

    if s1 == s2:
        return EXACT

    if not s1.strip() or not s2.strip():
        return 0.0

    if s1 in s2 or s2 in s1:
        return CONTAINS

    words1 = s1.split()
    words2 = s2.split()

    if sorted(words1) == sorted(words2):
        return WORD_ORDER

    if all(_overlaps(w, words2) for w in words1) or all(
        _overlaps(w, words1) for w in words2
    ):
        return ALL_WORDS

    matching = sum(1 for w in words1 if _overlaps(w, words2))
    return matching / max(len(words1), len(words2)) * PARTIAL_SCALE
