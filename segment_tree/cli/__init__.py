from .params import DriverParams
from .driver import Driver
from .main import main
