import random

import pytest

from lp_rowgen.rowgen.rotate import RandomRotate, RotatedView, make_random_rotate, rotate


def test_rotate_shifts_start():
    assert list(rotate(["a", "b", "c", "d"], 1)) == ["b", "c", "d", "a"]


def test_full_rotation_is_identity():
    seq = [10, 20, 30]
    assert list(rotate(seq, 3)) == seq
    assert list(rotate(seq, 0)) == seq


def test_rotation_law():
    seq = list("abcdef")
    n = len(seq)
    for r in range(n + 1):
        view = rotate(seq, r)
        assert len(view) == n
        assert sorted(view) == sorted(seq)
        doubled = list(view) + list(view)
        expected = seq[r % n:] + seq[: r % n]
        assert doubled[:n] == expected
        assert doubled[n:] == expected


def test_empty_sequence():
    assert list(rotate([], 0)) == []
    assert len(RotatedView([], 5)) == 0


@pytest.mark.parametrize("offset", [-1, 4])
def test_offset_out_of_range(offset):
    with pytest.raises(ValueError):
        rotate([1, 2, 3], offset)


def test_view_indexing_does_not_copy():
    seq = [1, 2, 3, 4]
    view = rotate(seq, 2)
    assert view[0] == 3
    assert view[-1] == 2
    assert view[1:3] == [4, 1]
    with pytest.raises(IndexError):
        view[4]
    seq[0] = 99
    assert view[2] == 99


def test_random_rotate_draws_inclusive_offset(scripted_random):
    rng = scripted_random(4, 1)
    rr = RandomRotate(rng)
    assert list(rr([1, 2, 3, 4])) == [1, 2, 3, 4]
    assert list(rr([1, 2, 3, 4])) == [2, 3, 4, 1]
    assert rng.bounds == [(0, 4), (0, 4)]


def test_random_rotate_materializes_iterables(scripted_random):
    rr = RandomRotate(scripted_random(2))
    assert list(rr(x for x in "abc")) == ["c", "a", "b"]


def test_random_rotate_seed_matches_random():
    expected = random.Random(5)
    rr = RandomRotate(5)
    for _ in range(10):
        off = expected.randint(0, 6)
        assert list(rr(range(6))) == list(rotate(range(6), off))


def test_make_random_rotate_without_source():
    rr = make_random_rotate()
    assert isinstance(rr.rng, random.Random)
    for _ in range(5):
        view = rr([1, 2, 3])
        assert sorted(view) == [1, 2, 3]
        assert 0 <= view.offset < 3
