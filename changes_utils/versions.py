"""Version incrementing.

Versions in a Changes file are bumped by the smallest step the trailing
segment can express, so the width of that segment is kept:

- "9" → "10"
- "1.23" → "1.24", "1.99" → "2.00"
- "1.2.3" → "1.2.4", "1.2.09" → "1.2.10"
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal

from .exceptions import VersionFormatError

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"\d+", re.ASCII)
_DECIMAL_RE = re.compile(r"\d+\.(\d+)", re.ASCII)
_DOTTED_RE = re.compile(r"(\d+\.\d+\.)(\d+)", re.ASCII)


def increment_version(version: str) -> str:
    """Return the next version after ``version``.

    Two-segment versions are treated as decimal numbers (the usual CPAN
    style), so "1.99" carries over into "2.00". Three-segment versions only
    ever bump the last segment.

    Raises:
        VersionFormatError: If ``version`` is not "123", "1.23" or "1.2.3".
    """
    logger.debug("Incrementing version %s", version)

    decimal = _DECIMAL_RE.fullmatch(version)
    dotted = _DOTTED_RE.fullmatch(version)
    if _INTEGER_RE.fullmatch(version):
        new = str(int(version) + 1)
    elif decimal:
        # Fixed-point format keeps trailing zeros and avoids "2E-7"
        step = Decimal(1).scaleb(-len(decimal.group(1)))
        new = f"{Decimal(version) + step:f}"
    elif dotted:
        prefix, patch = dotted.groups()
        new = prefix + str(int(patch) + 1).zfill(len(patch))
    else:
        raise VersionFormatError(version)

    logger.debug("Will increment version to %s", new)
    return new
