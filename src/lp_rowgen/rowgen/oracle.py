from __future__ import annotations

import logging
import operator
from typing import Any, Callable, Iterable, Protocol

from .rotate import RandomSource, make_random_rotate
from .types import AddViolated, CompareHow, GetCandidates, HowViolated, Measure

log = logging.getLogger(__name__)

Reorder = Callable[[Iterable[Any]], Iterable[Any]]


class SeparationOracle(Protocol):
    """Try once to find a violated row and add it; return whether one was added."""

    def __call__(self) -> bool:
        ...


def is_violated(measure: Measure) -> bool:
    """True when ``measure`` is present.

    ``None`` and ``False`` mean "not violated". Zero and negative
    measures are present values.
    """
    return measure is not None and measure is not False


def _identity(candidates: Iterable[Any]) -> Iterable[Any]:
    return candidates


class MaxViolatedOracle:
    """Commits the single most violated candidate.

    ``compare(best, how)`` must return True when ``how`` is strictly
    better than ``best``; with the default ``operator.lt`` the largest
    measure wins and ties keep the earliest candidate.
    """

    def __init__(
        self,
        get_candidates: GetCandidates,
        how_violated: HowViolated,
        add_violated: AddViolated,
        compare: CompareHow = operator.lt,
    ):
        self.get_candidates = get_candidates
        self.how_violated = how_violated
        self.add_violated = add_violated
        self.compare = compare

    def __call__(self) -> bool:
        best_how: Measure = None
        best_cand: Any = None
        found = False
        evaluated = 0
        for cand in self.get_candidates():
            how = self.how_violated(cand)
            evaluated += 1
            if not is_violated(how):
                continue
            if not found or self.compare(best_how, how):
                best_how, best_cand = how, cand
                found = True
        if not found:
            log.debug("max-violated: none of %d candidate(s) violated", evaluated)
            return False
        log.debug("max-violated: adding %r (how=%r, evaluated=%d)", best_cand, best_how, evaluated)
        self.add_violated(best_cand)
        return True


class FirstViolatedOracle:
    """Commits the first violated candidate in ``reorder(candidates)`` order."""

    def __init__(
        self,
        get_candidates: GetCandidates,
        how_violated: HowViolated,
        add_violated: AddViolated,
        reorder: Reorder | None = None,
    ):
        self.get_candidates = get_candidates
        self.how_violated = how_violated
        self.add_violated = add_violated
        self.reorder = reorder if reorder is not None else _identity

    def __call__(self) -> bool:
        evaluated = 0
        for cand in self.reorder(self.get_candidates()):
            evaluated += 1
            if is_violated(self.how_violated(cand)):
                log.debug("first-violated: adding %r after %d evaluation(s)", cand, evaluated)
                self.add_violated(cand)
                return True
        log.debug("first-violated: none of %d candidate(s) violated", evaluated)
        return False


def max_violated_separation_oracle(
    get_candidates: GetCandidates,
    how_violated: HowViolated,
    add_violated: AddViolated,
    compare: CompareHow = operator.lt,
) -> MaxViolatedOracle:
    return MaxViolatedOracle(get_candidates, how_violated, add_violated, compare)


def first_violated_separation_oracle(
    get_candidates: GetCandidates,
    how_violated: HowViolated,
    add_violated: AddViolated,
    reorder: Reorder | None = None,
) -> FirstViolatedOracle:
    return FirstViolatedOracle(get_candidates, how_violated, add_violated, reorder)


def random_violated_separation_oracle(
    get_candidates: GetCandidates,
    how_violated: HowViolated,
    add_violated: AddViolated,
    rng: RandomSource | int | None = None,
) -> FirstViolatedOracle:
    """First-violated scan starting from a random rotation of the candidates.

    ``rng`` may be a ``random.Random``-like object, an integer seed, or
    None for a fresh unseeded generator. The oracle owns it from here on.
    """
    return FirstViolatedOracle(get_candidates, how_violated, add_violated, make_random_rotate(rng))


_STRATEGIES = {
    "max": "max",
    "most_violated": "max",
    "max_violated": "max",
    "first": "first",
    "first_violated": "first",
    "random": "random",
    "random_violated": "random",
}


def make_oracle(
    strategy: str,
    get_candidates: GetCandidates,
    how_violated: HowViolated,
    add_violated: AddViolated,
    *,
    compare: CompareHow | None = None,
    reorder: Reorder | None = None,
    rng: RandomSource | int | None = None,
) -> SeparationOracle:
    """Build an oracle by strategy name (max, first or random)."""
    key = _STRATEGIES.get(str(strategy).strip().lower().replace("-", "_"))
    if key is None:
        raise ValueError(
            f"Unknown separation strategy '{strategy}'. Expected one of: max, first, random"
        )
    if key == "max":
        return max_violated_separation_oracle(
            get_candidates, how_violated, add_violated, compare or operator.lt
        )
    if key == "first":
        return first_violated_separation_oracle(get_candidates, how_violated, add_violated, reorder)
    return random_violated_separation_oracle(get_candidates, how_violated, add_violated, rng)


__all__ = [
    "SeparationOracle",
    "Reorder",
    "is_violated",
    "MaxViolatedOracle",
    "FirstViolatedOracle",
    "max_violated_separation_oracle",
    "first_violated_separation_oracle",
    "random_violated_separation_oracle",
    "make_oracle",
]
