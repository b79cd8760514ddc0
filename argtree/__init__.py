"""
Argtree: command trees, token dispatch and generated help.

Subsystems
- arguments: OptionType, Option and Argument declarations.
- commands: the Command tree, its dispatcher and renderers, invoke().
- faults: FaultCode, the CommandException hierarchy and trigger().
- responses: "@file" expansion (imported as a submodule, not star-exported).
- validation: validator factories (imported as a submodule, not star-exported).
"""
__path__ = __import__("pkgutil").extend_path(__path__, __name__)  # NOQA: F-821
__title__ = 'argtree'
__author__ = 'Eiko Reishin (影皇嶺臣)'
__license__ = 'MIT'
# Placeholder, modified by dynamic-versioning.
__version__ = "0.0.0"

from . import responses, validation
from .arguments import *
from .commands import *
from .faults import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

# Placeholder, modified by dynamic-versioning.
version_info = VersionInfo(0, 0, 0, "final", 0, "")

__all__ = (
    "__path__",
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info",
    "responses",
    "validation",
)

# Declarations: OptionType, Option, Argument
__all__ += arguments.__all__  # type: ignore[attr-defined]
# Tree and runner: Command, invoke
__all__ += commands.__all__  # type: ignore[attr-defined]
# Faults: FaultCode, CommandException and subclasses, trigger
__all__ += faults.__all__  # type: ignore[attr-defined]
