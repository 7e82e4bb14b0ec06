from . import cache
from . import cli
from . import config
from . import dates
from . import exceptions
from . import get
from . import models
from . import transforms
from . import utils
from .exceptions import AocHelperError
from .get import get_data
from .models import AocDay
from .models import Puzzle
from .utils import format_elapsed
from .version import __version__

__all__ = [
    "AocDay",
    "AocHelperError",
    "Puzzle",
    "__version__",
    "cache",
    "cli",
    "config",
    "dates",
    "exceptions",
    "format_elapsed",
    "get",
    "get_data",
    "models",
    "transforms",
    "utils",
]
