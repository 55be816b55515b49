import numpy as np
import pytest

from . import tools
from ...computations import SumComputation, MaxComputation
from ...errors import InvalidRange, OutOfBounds
from ..base.segment_tree import SegmentTree
from ..sum_segment_tree import SumSegmentTree


def test_build():
    arr = [1, 3, 7, 27]
    tree = SumSegmentTree.build(arr)

    #         38
    #        /  \
    #       4    34
    #      / \  /  \
    #     1   3 7  27
    assert not tree.is_empty()
    assert len(tree) == len(arr)
    assert len(tree.data) == 16
    assert tree.data[0] is None
    assert tree.data[1:8] == [38, 4, 34, 1, 3, 7, 27]
    assert tree.data[8:] == [None] * 8


def test_build_with_explicit_computation():
    arr = [4, -2, 9]
    tree = SegmentTree(arr, MaxComputation())
    assert tree.get(0, 2) == 9
    assert SegmentTree.build(arr, SumComputation()).get(0, 2) == 11


def test_build_accepts_numpy_arrays_and_iterables():
    arr = np.arange(10)
    tools.verify_tree(SumSegmentTree(arr), list(arr), sum)
    tools.verify_tree(SumSegmentTree(iter(range(5))), list(range(5)), sum)


def test_build_rejects_invalid_computation():
    with pytest.raises(ValueError):
        SegmentTree([1, 2, 3], sum)


def test_empty_tree():
    tree = SumSegmentTree([])

    assert len(tree) == 0
    assert tree.data == []
    assert tree.is_empty()

    for value in [0, 1, 2, 100]:
        with pytest.raises(OutOfBounds) as e:
            tree.get(value, value)
        assert e.value == OutOfBounds(value, 0)
        assert (e.value.index, e.value.len) == (value, 0)

        with pytest.raises(OutOfBounds) as e:
            tree.modify(0, value)
        assert e.value == OutOfBounds(0, 0)


def test_get():
    arr = [1, 3, 7, 27, 73]
    tree = SumSegmentTree(arr)

    assert not tree.is_empty()
    tools.verify_tree(tree, arr, sum)
    assert tree.sum(1, 3) == 37


def test_get_example():
    tree = SumSegmentTree([1, 3, 7, 27])
    assert tree.get(0, 3) == 38
    assert tree.get(1, 2) == 10


@pytest.mark.parametrize("left, right", [(0, 5), (1, 6), (6, 1234), (3, 435345)])
def test_get_out_of_bounds(left, right):
    tree = SumSegmentTree([1, 3, 7, 27, 73])
    with pytest.raises(OutOfBounds) as e:
        tree.get(left, right)
    assert e.value == OutOfBounds(right, 5)
    assert isinstance(e.value, IndexError)


@pytest.mark.parametrize("left, right", [(5, 4), (2, 1), (2, 0), (4, 1), (100, 3)])
def test_get_invalid_range(left, right):
    tree = SumSegmentTree([1, 3, 7, 27, 73])
    with pytest.raises(InvalidRange) as e:
        tree.get(left, right)
    assert e.value == InvalidRange(left, right)
    assert (e.value.left, e.value.right) == (left, right)


def test_invalid_range_is_checked_on_empty_tree_first():
    with pytest.raises(InvalidRange):
        SumSegmentTree([]).get(3, 1)


def test_negative_indexes_are_out_of_bounds():
    tree = SumSegmentTree([1, 2, 3])
    with pytest.raises(OutOfBounds) as e:
        tree.get(-1, 2)
    assert e.value == OutOfBounds(-1, 3)
    with pytest.raises(OutOfBounds):
        tree.modify(-1, 5)


def test_modify():
    arr = [1, 3, 7, 27]
    tree = SumSegmentTree(arr)

    assert tree.modify(3, 10) is None
    tree.modify(1, 73)

    #         91
    #        /  \
    #      74    17
    #      / \  /  \
    #     1  73 7  10
    assert len(tree.data) == 16
    assert len(tree) == len(arr)
    assert tree.data[0] is None
    assert tree.data[1:8] == [91, 74, 17, 1, 73, 7, 10]
    assert tree.data[8:] == [None] * 8
    assert tree.get(0, 1) == 74
    assert tree.get(2, 3) == 17


@pytest.mark.parametrize("pos", [4, 5, 100])
def test_modify_out_of_bounds(pos):
    tree = SumSegmentTree([1, 3, 7, 27])
    with pytest.raises(OutOfBounds) as e:
        tree.modify(pos, 1)
    assert e.value == OutOfBounds(pos, 4)
    assert tree.data[1:8] == [38, 4, 34, 1, 3, 7, 27]


def test_modify_twice_is_same_as_once():
    once, twice = SumSegmentTree([5, 1, 4, 2, 8]), SumSegmentTree([5, 1, 4, 2, 8])
    once.modify(2, -6)
    twice.modify(2, -6)
    twice.modify(2, -6)
    assert once.data == twice.data


def test_random_modifications_keep_tree_consistent():
    rng = np.random.default_rng(3)
    arr = [int(v) for v in rng.integers(-100, 100, size=13)]
    tree = SumSegmentTree(arr)
    for _ in range(50):
        pos, value = int(rng.integers(0, len(arr))), int(rng.integers(-100, 100))
        arr[pos] = value
        tree.modify(pos, value)
        assert tree.get(pos, pos) == value
    tools.verify_tree(tree, arr, sum)


@pytest.mark.parametrize("length", [1, 2, 3, 5, 8, 17, 33])
def test_non_power_of_two_lengths(length):
    arr = list(range(1, length + 1))
    tree = SumSegmentTree(arr)
    assert len(tree.data) == 4 * length
    tools.verify_tree(tree, arr, sum)


@pytest.mark.parametrize("left, right", [(0.5, 2), (0, 2.0), ("0", 2), (None, 1)])
def test_get_rejects_non_integer_indexes(left, right):
    tree = SumSegmentTree([1, 2, 3])
    with pytest.raises(TypeError):
        tree.get(left, right)


@pytest.mark.parametrize("pos", [1.0, 0.5, "1"])
def test_modify_rejects_non_integer_indexes(pos):
    tree = SumSegmentTree([1, 2, 3])
    with pytest.raises(TypeError):
        tree.modify(pos, 10)
    assert tree.get(0, 2) == 6


def test_numpy_integer_indexes():
    tree = SumSegmentTree([1, 2, 3, 4])
    tree.modify(np.int64(2), 10)
    assert tree.get(np.int32(1), np.int64(3)) == 16
