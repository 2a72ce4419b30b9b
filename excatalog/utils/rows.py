QUOTE = '"'


def parse_row(line: str, delimiter: str = ",") -> list[str]:
    """
    Split one delimited line into trimmed fields.

    A double quote toggles "inside quotes"; delimiters inside quotes are kept
    as part of the field. Quote characters themselves are dropped. Escaped
    quotes ("") are not special, they simply toggle twice.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields
