import typing as T

from ..base.base_object import BaseObject
from ..errors import ProtocolError
from ..trees import AnySegmentTree, SumSegmentTree, MaxSegmentTree, MinSegmentTree, MaxSliceSumSegmentTree
from .params import DriverParams

MODIFY_QUERY = 0
GET_QUERY = 1

TREES: T.Dict[str, T.Type[AnySegmentTree]] = {
    "sum": SumSegmentTree,
    "max": MaxSegmentTree,
    "min": MinSegmentTree,
    "max_slice_sum": MaxSliceSumSegmentTree,
}


class Driver(BaseObject):
    """Feeds the text query protocol into a segment tree.

    Input is the element count, the elements, the query count and then one
    query per line: `0 pos value` overwrites an element and `1 left right`
    prints the answer for a closed range. Blank lines are ignored.
    """

    def __init__(self, params: DriverParams = DriverParams()):
        super(Driver, self).__init__()
        if not isinstance(params, DriverParams):
            raise ValueError("argument params must be an instance of DriverParams")
        if params.computation not in TREES:
            raise ValueError(f"unknown computation {params.computation}, must be one of {', '.join(TREES)}")
        self.params: DriverParams = params
        self.tree_class: T.Type[AnySegmentTree] = TREES[params.computation]

    def _lines(self, stream_in: T.TextIO) -> T.Iterator[T.Tuple[int, str]]:
        for n, line in enumerate(stream_in, 1):
            line = line.strip()
            if line:
                yield n, line

    @staticmethod
    def _next_ints(lines: T.Iterator[T.Tuple[int, str]], what: str) -> T.Tuple[int, T.List[int]]:
        try:
            n, line = next(lines)
        except StopIteration:
            raise ProtocolError(f"unexpected end of input, expected {what}") from None
        try:
            return n, [int(token) for token in line.split()]
        except ValueError:
            raise ProtocolError(f"{what} must consist of integers, got {line!r}", n) from None

    def _count(self, lines: T.Iterator[T.Tuple[int, str]], what: str) -> int:
        n, values = self._next_ints(lines, what)
        if len(values) != 1 or values[0] < 0:
            raise ProtocolError(f"{what} must be a single non negative integer", n)
        return values[0]

    def _index(self, value: int) -> int:
        return value - 1 if self.params.one_based else value

    def run(self, stream_in: T.TextIO, stream_out: T.TextIO) -> AnySegmentTree:
        lines = self._lines(stream_in)
        length = self._count(lines, "element count")
        sequence: T.List[int] = []
        if length > 0:
            n, sequence = self._next_ints(lines, "sequence")
            if len(sequence) != length:
                raise ProtocolError(f"expected {length} elements, got {len(sequence)}", n)

        tree = self.tree_class.build(sequence)
        queries = self._count(lines, "query count")
        self.log.info(f"processing {queries} queries over {length} elements")
        for _ in range(queries):
            n, query = self._next_ints(lines, "query")
            if len(query) != 3:
                raise ProtocolError(f"a query must have 3 integers, got {len(query)}", n)
            kind, a, b = query
            if kind == MODIFY_QUERY:
                tree.modify(self._index(a), b)
            elif kind == GET_QUERY:
                result = tree.get(self._index(a), self._index(b))
                print(tree.computation.answer(result), file=stream_out)
            else:
                raise ProtocolError(f"unexpected query type {kind}", n)
        return tree
