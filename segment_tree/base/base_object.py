import logging
import os
import sys
import typing as T
from abc import ABC

import coloredlogs

DEBUG_ENV = "ST_DEBUG"
LOG_FORMAT = "%(asctime)s %(name)-24s %(levelname)-5s %(message)s"

_LEVELS = {
    0: logging.ERROR,
    1: logging.WARNING,
    2: logging.INFO,
    3: logging.DEBUG,
}


class BaseObject(ABC):
    def __init__(self):
        self.log: logging.Logger = logging.getLogger(self.__class__.__name__)
        level = self._get_debug_level()
        if not self._own_handlers():
            # stdout is left to the caller, logs always go to stderr
            coloredlogs.install(level=level, logger=self.log, fmt=LOG_FORMAT)
            self.log.propagate = False
        self.log.setLevel(level)
        for handler in self._own_handlers():
            handler.setLevel(level)

    def _own_handlers(self) -> T.List[logging.Handler]:
        return [h for h in self.log.handlers if isinstance(h, coloredlogs.StandardErrorHandler)]

    def _get_debug_level(self) -> int:
        level = logging.ERROR
        debug_info = os.getenv(DEBUG_ENV, "0")
        for debug_element_level in debug_info.split(","):
            split_debug_element_level = debug_element_level.strip().split(":")
            if len(split_debug_element_level) == 2:
                element_name, debug_level_str = split_debug_element_level
                if element_name != self.__class__.__name__ or not debug_level_str.isnumeric():
                    continue
                debug_level = int(debug_level_str)

            elif len(split_debug_element_level) == 1 and split_debug_element_level[0].isnumeric():
                debug_level = int(split_debug_element_level[0])

            else:
                print(f"incorrect debug specification {debug_element_level}", file=sys.stderr)
                continue

            level = _LEVELS.get(min(debug_level, 3), logging.ERROR)
        return level
