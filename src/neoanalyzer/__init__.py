from .exceptions import *
from .configs import *
from .physics import *
from .bodies import *
from .neorecord import *
from .neows import *
from .logging import set_log_level

__version__ = "0.1.0"
