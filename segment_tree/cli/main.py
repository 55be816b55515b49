import sys
import typing as T

from ..errors import SegmentTreeError
from .args import get_args
from .driver import Driver


def main(argv: T.Optional[T.List[str]] = None,
         stream_in: T.TextIO = None,
         stream_out: T.TextIO = None) -> int:
    driver = Driver(get_args(argv).driver_params())
    stream_in = sys.stdin if stream_in is None else stream_in
    stream_out = sys.stdout if stream_out is None else stream_out
    try:
        driver.run(stream_in, stream_out)
    except SegmentTreeError as e:
        driver.log.error(str(e))
        return 1
    return 0


def run_main() -> None:
    sys.exit(main())
