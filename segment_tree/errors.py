class SegmentTreeError(Exception):
    """Base class for every error raised by this package."""

    def _fields(self) -> tuple:
        return ()

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self):
        return hash((type(self), self._fields()))


class OutOfBounds(SegmentTreeError, IndexError):
    """An index used in a query or update is not smaller than the tree length."""

    def __init__(self, index: int, len: int):
        self.index = index
        self.len = len
        super(OutOfBounds, self).__init__(f"Index {index} is out of bounds. It should be smaller than {len}")

    def _fields(self) -> tuple:
        return self.index, self.len


class InvalidRange(SegmentTreeError, ValueError):
    """A query range whose left index is greater than its right index."""

    def __init__(self, left: int, right: int):
        self.left = left
        self.right = right
        super(InvalidRange, self).__init__(
            f"Left index <{left}> should be lower or equal to the right index <{right}>"
        )

    def _fields(self) -> tuple:
        return self.left, self.right


class ProtocolError(SegmentTreeError, ValueError):
    """Malformed input given to the query driver."""

    def __init__(self, message: str, line: int = 0):
        self.line = line
        if line:
            message = f"line {line}: {message}"
        super(ProtocolError, self).__init__(message)

    def _fields(self) -> tuple:
        return str(self), self.line
