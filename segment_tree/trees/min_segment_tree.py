import typing as T

from .base.segment_tree import SegmentTree
from ..computations import MinComputation

T_ord = T.TypeVar("T_ord")


class MinSegmentTree(SegmentTree[T_ord, T_ord]):
    def __init__(self, sequence: T.Iterable[T_ord]):
        super(MinSegmentTree, self).__init__(sequence, MinComputation())

    def min(self, left: int, right: int) -> T_ord:
        return super(MinSegmentTree, self).get(left, right)
