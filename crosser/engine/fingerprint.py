"""Content fingerprint used to detect a correctly filled grid."""

from __future__ import annotations

import hashlib
from typing import Iterable

from ..core.constants import BLOCKER_MARKER
from ..core.models import Cell


def grid_content(cells: Iterable[Cell]) -> str:
    """Concatenate cell letters in row-major order, ``#`` for blockers."""

    return "".join(BLOCKER_MARKER if cell.is_blocker() else cell.letters for cell in cells)


def content_fingerprint(content: str) -> int:
    """Stable unsigned 64-bit hash of ``content``.

    Python's builtin ``hash`` is salted per process, so the digest comes from
    MD5 and is truncated to its first eight bytes.
    """

    digest = hashlib.md5(content.encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big")


def grid_fingerprint(cells: Iterable[Cell]) -> int:
    return content_fingerprint(grid_content(cells))
