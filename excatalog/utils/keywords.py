MIN_WORD_LENGTH = 3


def _words(text: str) -> set[str]:
    return {w for w in text.lower().split() if len(w) >= MIN_WORD_LENGTH}


def build_search_keywords(
    *,
    name: str,
    muscle_group: str,
    equipment: str,
    difficulty: str | None,
    force: str | None,
) -> frozenset[str]:
    """
    Lowercase search tokens for a record.

    Name and equipment contribute words longer than two characters; muscle
    group, difficulty and force are added whole.
    """
    keywords = _words(name)
    keywords.add(muscle_group.lower())

    if equipment.strip():
        keywords |= _words(equipment)

    if difficulty:
        keywords.add(difficulty.lower())

    if force:
        keywords.add(force.lower())

    return frozenset(keywords)
