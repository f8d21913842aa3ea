from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Any, Iterable, Iterator, Protocol


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int:
        ...


class RotatedView(Sequence):
    """Read-only cyclic view of a sequence starting at ``offset``.

    The underlying sequence is not copied. An offset equal to the length
    wraps to zero, so a full rotation is the identity view.
    """

    __slots__ = ("_seq", "_offset")

    def __init__(self, seq: Sequence, offset: int = 0):
        self._seq = seq
        n = len(seq)
        self._offset = offset % n if n else 0

    @property
    def offset(self) -> int:
        return self._offset

    def __len__(self) -> int:
        return len(self._seq)

    def __getitem__(self, idx):
        n = len(self._seq)
        if isinstance(idx, slice):
            return [self[i] for i in range(*idx.indices(n))]
        if idx < 0:
            idx += n
        if not 0 <= idx < n:
            raise IndexError("rotated view index out of range")
        return self._seq[(idx + self._offset) % n]

    def __iter__(self) -> Iterator[Any]:
        n = len(self._seq)
        for i in range(n):
            yield self._seq[(i + self._offset) % n]

    def __repr__(self) -> str:
        return f"RotatedView({list(self)!r}, offset={self._offset})"


def rotate(seq: Sequence, offset: int) -> RotatedView:
    """Return ``seq`` cyclically shifted to start at ``offset`` (0 <= offset <= len)."""
    n = len(seq)
    if offset < 0 or offset > n:
        raise ValueError(f"rotation offset {offset} outside [0, {n}]")
    return RotatedView(seq, offset)


class RandomRotate:
    """Reorder strategy rotating the candidates at a uniformly drawn offset.

    Owns its random source; the source state advances on every call so
    repeated scans start from different positions.
    """

    def __init__(self, rng: RandomSource | int | None = None):
        if rng is None:
            rng = random.Random()
        elif isinstance(rng, int) and not isinstance(rng, bool):
            rng = random.Random(rng)
        self.rng = rng

    def __call__(self, candidates: Iterable[Any]) -> RotatedView:
        seq = candidates if isinstance(candidates, Sequence) else list(candidates)
        n = len(seq)
        # inclusive upper bound: offset == n is a no-op rotation
        offset = self.rng.randint(0, n)
        return rotate(seq, offset)


def make_random_rotate(rng: RandomSource | int | None = None) -> RandomRotate:
    return RandomRotate(rng)


__all__ = ["RandomSource", "RotatedView", "rotate", "RandomRotate", "make_random_rotate"]
