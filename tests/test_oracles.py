import operator
import random

import pytest

from lp_rowgen.rowgen.oracle import (
    FirstViolatedOracle,
    MaxViolatedOracle,
    first_violated_separation_oracle,
    is_violated,
    make_oracle,
    max_violated_separation_oracle,
    random_violated_separation_oracle,
)
from lp_rowgen.rowgen.rotate import RandomRotate


class Recorder:
    """Candidates are indices into ``measures``; records evaluations and commits."""

    def __init__(self, measures):
        self.measures = list(measures)
        self.evaluated = []
        self.added = []
        self.supplied = 0

    def get_candidates(self):
        self.supplied += 1
        return list(range(len(self.measures)))

    def how_violated(self, cand):
        self.evaluated.append(cand)
        return self.measures[cand]

    def add_violated(self, cand):
        self.added.append(cand)

    @property
    def callables(self):
        return self.get_candidates, self.how_violated, self.add_violated


def test_is_violated():
    assert not is_violated(None)
    assert not is_violated(False)
    assert is_violated(True)
    assert is_violated(0)
    assert is_violated(0.0)
    assert is_violated(-2.5)


def test_max_violated_ties_keep_earliest():
    rec = Recorder([3, 7, 2, 7])
    assert max_violated_separation_oracle(*rec.callables)() is True
    assert rec.added == [1]
    assert rec.evaluated == [0, 1, 2, 3]


def test_max_violated_none_violated():
    rec = Recorder([None, None, None])
    assert MaxViolatedOracle(*rec.callables)() is False
    assert rec.added == []


def test_max_violated_empty_candidates():
    rec = Recorder([])
    assert MaxViolatedOracle(*rec.callables)() is False
    assert rec.added == []


def test_max_violated_skips_absent_and_keeps_zero_and_negative():
    rec = Recorder([None, -1.0, None, -3.0, False])
    assert MaxViolatedOracle(*rec.callables)() is True
    assert rec.added == [1]

    rec = Recorder([None, 0.0, None])
    assert MaxViolatedOracle(*rec.callables)() is True
    assert rec.added == [1]


def test_max_violated_custom_comparator():
    rec = Recorder([5, 1, 4, 1])
    assert MaxViolatedOracle(*rec.callables, compare=operator.gt)() is True
    assert rec.added == [1]


def test_max_violated_tuple_measures():
    rec = Recorder([(1, "b"), (2, "a"), (2, "a")])
    assert MaxViolatedOracle(*rec.callables)() is True
    assert rec.added == [1]


def test_first_violated_short_circuits():
    rec = Recorder([False, False, True, True])
    assert first_violated_separation_oracle(*rec.callables)() is True
    assert rec.added == [2]
    assert rec.evaluated == [0, 1, 2]


def test_first_violated_with_reorder():
    rec = Recorder([None, 1.0, None, 2.0])
    oracle = FirstViolatedOracle(*rec.callables, reorder=lambda c: list(reversed(c)))
    assert oracle() is True
    assert rec.added == [3]
    assert rec.evaluated == [3]


def test_first_violated_none_violated():
    rec = Recorder([None, False, None])
    assert FirstViolatedOracle(*rec.callables)() is False
    assert rec.added == []
    assert rec.evaluated == [0, 1, 2]


def test_random_violated_full_rotation_is_original_order(scripted_random):
    rec = Recorder([None] * 5)
    rng = scripted_random(5)
    assert random_violated_separation_oracle(*rec.callables, rng=rng)() is False
    assert rec.evaluated == [0, 1, 2, 3, 4]
    assert rng.bounds == [(0, 5)]


def test_random_violated_starts_at_offset(scripted_random):
    rec = Recorder([1.0, None, None, None])
    oracle = random_violated_separation_oracle(*rec.callables, rng=scripted_random(2))
    assert oracle() is True
    assert rec.evaluated == [2, 3, 0]
    assert rec.added == [0]


def test_random_violated_rng_state_persists():
    seed = 11
    expected = random.Random(seed)
    rec = Recorder([None] * 7)
    oracle = random_violated_separation_oracle(*rec.callables, rng=random.Random(seed))
    for _ in range(5):
        rec.evaluated.clear()
        oracle()
        off = expected.randint(0, 7) % 7
        assert rec.evaluated == list(range(off, 7)) + list(range(off))


def test_random_violated_accepts_int_seed():
    a, b = Recorder([None] * 9), Recorder([None] * 9)
    random_violated_separation_oracle(*a.callables, rng=3)()
    random_violated_separation_oracle(*b.callables, rng=3)()
    assert a.evaluated == b.evaluated


def test_random_violated_generator_supplier(scripted_random):
    added = []
    oracle = random_violated_separation_oracle(
        lambda: (c for c in "wxyz"),
        lambda c: c in ("w", "y") or None,
        added.append,
        rng=scripted_random(1),
    )
    assert oracle() is True
    assert added == ["y"]


@pytest.mark.parametrize("strategy", ["max", "first", "random"])
def test_supplier_is_queried_on_every_call(strategy):
    rec = Recorder([None, None])
    oracle = make_oracle(strategy, *rec.callables, rng=0)
    oracle()
    oracle()
    assert rec.supplied == 2


@pytest.mark.parametrize(
    "name, cls",
    [
        ("max", MaxViolatedOracle),
        ("most_violated", MaxViolatedOracle),
        ("first", FirstViolatedOracle),
        ("First-Violated", FirstViolatedOracle),
        ("random", FirstViolatedOracle),
    ],
)
def test_make_oracle_by_name(name, cls):
    rec = Recorder([None])
    assert isinstance(make_oracle(name, *rec.callables), cls)


def test_make_oracle_unknown_strategy():
    rec = Recorder([None])
    with pytest.raises(ValueError, match="Unknown separation strategy"):
        make_oracle("best", *rec.callables)


def test_evaluator_errors_propagate():
    def boom(_):
        raise KeyError("row")

    oracle = make_oracle("max", lambda: [1, 2], boom, lambda c: None)
    with pytest.raises(KeyError):
        oracle()


def test_random_violated_default_source_scans_cyclically():
    rec = Recorder([None] * 6)
    oracle = random_violated_separation_oracle(*rec.callables)
    for _ in range(8):
        rec.evaluated.clear()
        assert oracle() is False
        start = rec.evaluated[0]
        assert rec.evaluated == list(range(start, 6)) + list(range(start))
    assert rec.added == []


def test_random_violated_reorder_owns_the_source():
    rng = random.Random(4)
    oracle = random_violated_separation_oracle(*Recorder([None]).callables, rng=rng)
    assert isinstance(oracle.reorder, RandomRotate)
    assert oracle.reorder.rng is rng
