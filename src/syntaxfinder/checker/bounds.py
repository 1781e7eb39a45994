"""Array size discovery over a bounded window of preceding lines."""

from __future__ import annotations

import re
from collections.abc import Sequence

DEFAULT_WINDOW = 10

_ELEMENT_TYPES = r"(?:int|float|double|char|long|short|byte|boolean|String|auto|unsigned)"


def _declaration_patterns(name: str) -> list[re.Pattern[str]]:
    n = re.escape(name)
    return [
        # int a[5]
        re.compile(rf"\b{_ELEMENT_TYPES}\s+{n}\s*\[\s*(\d+)\s*\]"),
        # a = new int[5]
        re.compile(rf"\b{n}\s*=\s*new\s+\w+\s*\[\s*(\d+)\s*\]"),
        # a = new int[]{1, 2, 3}
        re.compile(rf"\b{n}\s*=\s*new\s+\w+\s*\[\s*\]\s*\{{([^}}]*)\}}"),
        # a[] = {1, 2, 3}
        re.compile(rf"\b{n}\s*\[\s*\]\s*=\s*\{{([^}}]*)\}}"),
        # a = {1, 2, 3}
        re.compile(rf"\b{n}\s*=\s*\{{([^}}]*)\}}"),
        # const a = [1, 2, 3]
        re.compile(rf"\b(?:let|const|var)\s+{n}\s*=\s*\[([^\]]*)\]"),
    ]


def _size_from_group(group: str) -> int:
    if group.strip().isdecimal():
        return int(group)
    return len([el for el in group.split(",") if el.strip()])


def find_declared_size(
    lines: Sequence[str],
    index: int,
    name: str,
    window: int = DEFAULT_WINDOW,
) -> int | None:
    """Return the declared size of array ``name`` seen near ``lines[index]``.

    Scans ``lines[index - window .. index]`` in document order and stops at
    the first declaration yielding a positive size. An explicit numeric size
    wins; otherwise the initializer elements are counted. Returns None when
    no size can be determined.
    """
    patterns = _declaration_patterns(name)
    start = max(0, index - window)
    for line in lines[start : index + 1]:
        text = line.strip()
        for pattern in patterns:
            match = pattern.search(text)
            if not match:
                continue
            size = _size_from_group(match.group(1))
            if size > 0:
                return size
            break
    return None
