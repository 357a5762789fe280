def utf16_offset_to_index(line: str, offset: int) -> int:
    """Convert an LSP character offset (UTF-16 code units) to a str index.

    An offset pointing at the low surrogate of a pair maps to that character.
    Offsets past the end of the line map past ``len(line)``.
    """
    units = 0
    for index, char in enumerate(line):
        units += 2 if ord(char) > 0xFFFF else 1
        if units > offset:
            return index
    return len(line) + (offset - units)
