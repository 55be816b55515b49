import numbers
import typing as T

from ...base.base_object import BaseObject
from ...computations.base.computation import SegmentTreeComputation, T_in, T_out
from ...errors import InvalidRange, OutOfBounds

SLOTS_PER_ELEMENT = 4


class SegmentTree(BaseObject, T.Generic[T_in, T_out]):
    """Array backed segment tree over a fixed length sequence.

    Node 1 covers the whole sequence and node `i` has children `2 * i` and
    `2 * i + 1`. A node covering `[l, r]` splits at `(l + r) // 2`.
    """

    def __init__(self, sequence: T.Iterable[T_in], computation: SegmentTreeComputation[T_in, T_out]):
        super(SegmentTree, self).__init__()
        if not isinstance(computation, SegmentTreeComputation):
            raise ValueError("argument computation must be an instance of SegmentTreeComputation")
        self.computation: SegmentTreeComputation[T_in, T_out] = computation
        values = list(sequence)
        self._len: int = len(values)
        self.data: T.List[T.Optional[T_out]] = []
        if self._len == 0:
            self.log.info(f"built empty {type(self).__name__}")
            return

        self.data = [None for _ in range(SLOTS_PER_ELEMENT * self._len)]
        self._build_helper(values, 1, 0, self._len - 1)
        self.log.info(f"built {type(self).__name__} with {self._len} elements using {self.computation}")

    @classmethod
    def build(cls, sequence: T.Iterable[T_in], *args, **kwargs) -> "SegmentTree[T_in, T_out]":
        return cls(sequence, *args, **kwargs)

    def __len__(self) -> int:
        return self._len

    def is_empty(self) -> bool:
        return self._len == 0

    def _build_helper(self, values: T.List[T_in], node: int, node_start: int, node_end: int) -> None:
        if node_start == node_end:
            self.data[node] = self.computation.init(values[node_start])
            return
        mid = (node_start + node_end) // 2
        self._build_helper(values, 2 * node, node_start, mid)
        self._build_helper(values, 2 * node + 1, mid + 1, node_end)
        self.data[node] = self.computation.combine(self.data[2 * node], self.data[2 * node + 1])

    def _get_helper(self, start: int, end: int, node: int, node_start: int, node_end: int) -> T_out:
        if start == node_start and end == node_end:
            return self.data[node]
        mid = (node_start + node_end) // 2
        if end <= mid:
            return self._get_helper(start, end, 2 * node, node_start, mid)
        if mid + 1 <= start:
            return self._get_helper(start, end, 2 * node + 1, mid + 1, node_end)
        return self.computation.combine(
            self._get_helper(start, mid, 2 * node, node_start, mid),
            self._get_helper(mid + 1, end, 2 * node + 1, mid + 1, node_end),
        )

    def _modify_helper(self, pos: int, value: T_in, node: int, node_start: int, node_end: int) -> None:
        if node_start == node_end:
            self.data[node] = self.computation.update(self.data[node], value)
            return
        mid = (node_start + node_end) // 2
        if pos <= mid:
            self._modify_helper(pos, value, 2 * node, node_start, mid)
        else:
            self._modify_helper(pos, value, 2 * node + 1, mid + 1, node_end)
        self.data[node] = self.computation.combine(self.data[2 * node], self.data[2 * node + 1])

    def _check_integral(self, *indexes) -> None:
        for index in indexes:
            if not isinstance(index, numbers.Integral):
                self.log.warning(f"index {index!r} is not an integer")
                raise TypeError(f"indexes must be integers, got {type(index).__name__}")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._len:
            self.log.warning(f"index {index} is out of bounds for length {self._len}")
            raise OutOfBounds(index, self._len)

    def get(self, left: int, right: int) -> T_out:
        """Returns the aggregate of the closed range [left, right].

        Raises:
            InvalidRange: if left > right.
            OutOfBounds: if right is not a valid index.
            TypeError: if an index is not an integer.
        """
        self._check_integral(left, right)
        if left > right:
            self.log.warning(f"invalid range [{left}, {right}]")
            raise InvalidRange(left, right)
        self._check_index(right)
        self._check_index(left)
        self.log.debug(f"getting range [{left}, {right}]")
        return self._get_helper(left, right, 1, 0, self._len - 1)

    def modify(self, pos: int, value: T_in) -> None:
        """Overwrites the element at `pos` and refreshes every range containing it.

        Raises:
            OutOfBounds: if pos is not a valid index.
            TypeError: if pos is not an integer.
        """
        self._check_integral(pos)
        self._check_index(pos)
        self.log.debug(f"modifying position {pos}")
        self._modify_helper(pos, value, 1, 0, self._len - 1)

    def __repr__(self):
        return f"{type(self).__name__}(len={self._len}, computation={self.computation})"
