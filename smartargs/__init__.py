__title__ = 'smartargs'
__author__ = 'SmartArgs contributors'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "3.0.0"

import logging

from .cli import *
from .faults import *
from .options import *
from .parser import *
from .usage import *
from .utils import Cell

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(3, 0, 0, "final", 0, "")

# Library logging stays silent unless the host configures it.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info",
    "Cell",
)

# Load the exposed API of the options
__all__ += options.__all__  # type: ignore[attr-defined]
# Load the exposed API of the parser
__all__ += parser.__all__  # type: ignore[attr-defined]
# Load the exposed API of the usage formatter
__all__ += usage.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the one-call entry points
__all__ += cli.__all__  # type: ignore[attr-defined]
