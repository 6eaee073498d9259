from __future__ import annotations

from typing import Optional

from ..config import FIVE_PRIME_MARKER, THREE_PRIME_MARKER
from ..models.data_schemas import Strand, Truncation
from .exceptions import OrientationUndefinedError


_FIVE_PRIME_TRUNCATIONS = frozenset({Truncation.FIVE_PRIME, Truncation.BOTH})
_THREE_PRIME_TRUNCATIONS = frozenset({Truncation.THREE_PRIME, Truncation.BOTH})


def rel0_to_tbl(start: int, end: int) -> tuple[str, str]:
    """Zero-based half-open interval to one-based inclusive tokens."""
    return str(start + 1), str(end)


def resolve_strand(strand: Optional[Strand], what: str = "feature") -> Strand:
    if strand is None:
        raise OrientationUndefinedError(f"{what} has no strand; cannot render coordinates")
    try:
        return Strand(strand)
    except ValueError as exc:
        raise OrientationUndefinedError(f"{what} has unknown strand {strand!r}") from exc


def to_tbl_coordinates(
    start: int,
    end: int,
    strand: Optional[Strand],
    truncation: Truncation = Truncation.NONE,
    what: str = "feature",
) -> tuple[str, str]:
    """Render the first two columns of a feature row.

    Reverse features list the larger position first. Truncation markers are
    attached to the written slots after the swap: ``<`` always goes on the
    first column and ``>`` on the second, whatever the strand.
    """
    strand = resolve_strand(strand, what)
    first, second = rel0_to_tbl(start, end)
    if strand is Strand.REVERSE:
        first, second = second, first
    if truncation in _FIVE_PRIME_TRUNCATIONS:
        first = f"{FIVE_PRIME_MARKER}{first}"
    if truncation in _THREE_PRIME_TRUNCATIONS:
        second = f"{THREE_PRIME_MARKER}{second}"
    return first, second
