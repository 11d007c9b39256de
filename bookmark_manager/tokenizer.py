"""Split a single CSV row into fields."""

from __future__ import annotations

_QUOTE = '"'
_SEPARATOR = ","


def split_csv_line(line: str) -> list[str]:
    """Split one CSV line into trimmed field values.

    Double quotes toggle quoting anywhere in the line, a doubled quote inside a
    quoted section is a literal quote and commas inside quotes do not separate
    fields. An unterminated quote runs to the end of the line. Each field is
    trimmed and loses one surrounding pair of quotes if it has one.
    """
    fields: list[str] = []
    current: list[str] = []
    in_quotes = False
    idx = 0
    length = len(line)

    while idx < length:
        char = line[idx]
        if char == _QUOTE:
            if in_quotes and idx + 1 < length and line[idx + 1] == _QUOTE:
                current.append(_QUOTE)
                idx += 1
            else:
                in_quotes = not in_quotes
        elif char == _SEPARATOR and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        idx += 1
    fields.append("".join(current))

    return [_clean_field(value) for value in fields]


def _clean_field(value: str) -> str:
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] == _QUOTE:
        return value[1:-1]
    return value
