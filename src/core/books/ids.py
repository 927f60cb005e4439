"""Path id parsing."""

import re
from typing import Optional

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_book_id(raw: str) -> Optional[int]:
    """Parse a path id the lenient way the public API always has.

    Leading whitespace and a sign are allowed and anything after the
    leading digits is ignored, so ``"12abc"`` and ``"1.9"`` give 12 and 1.
    Returns None when there are no leading digits; callers treat that as
    an id no book can have.
    """
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Beyond the interpreter's int digit limit; no book has such an id
        return None
