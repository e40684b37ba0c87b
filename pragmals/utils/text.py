import re

LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(contents: str) -> list[str]:
    """
    Split text into lines the way editors number them.

    Only ``\\n``, ``\\r\\n`` and ``\\r`` end a line; form feeds and Unicode
    separators stay part of the line. A trailing line break does not start
    an extra empty line.
    """
    lines = LINE_BREAK.split(contents)
    if lines and lines[-1] == "":
        lines.pop()
    return lines
