"""
Console input and output services
"""
from enum import IntEnum
from typing import Any, Dict, Optional

from rich.console import Console


class Verbosity(IntEnum):
    """Output verbosity levels, ordered from least to most chatty"""
    QUIET = 16
    NORMAL = 32
    VERBOSE = 64
    VERY_VERBOSE = 128
    DEBUG = 256


def verbosity_from_flags(verbose: int = 0, quiet: bool = False, debug: bool = False) -> Verbosity:
    """
    Resolve command line flags into a single verbosity level

    --quiet wins over everything, --debug wins over -v counts.
    """
    if quiet:
        return Verbosity.QUIET
    if debug or verbose >= 3:
        return Verbosity.DEBUG
    if verbose == 2:
        return Verbosity.VERY_VERBOSE
    if verbose == 1:
        return Verbosity.VERBOSE
    return Verbosity.NORMAL


class ConsoleInput:
    """Named options parsed from the command line"""

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        self._options: Dict[str, Any] = dict(options or {})

    def get_option(self, name: str) -> Any:
        return self._options.get(name)

    def has_option(self, name: str) -> bool:
        return name in self._options


class ConsoleOutput:
    """Console writer that knows the requested verbosity"""

    def __init__(self, verbosity: Verbosity = Verbosity.NORMAL, console: Optional[Console] = None):
        self.verbosity = Verbosity(verbosity)
        self.console = console or Console()

    def is_quiet(self) -> bool:
        return self.verbosity <= Verbosity.QUIET

    def is_verbose(self) -> bool:
        return self.verbosity >= Verbosity.VERBOSE

    def is_very_verbose(self) -> bool:
        return self.verbosity >= Verbosity.VERY_VERBOSE

    def is_debug(self) -> bool:
        return self.verbosity >= Verbosity.DEBUG

    def write(self, text: Any, **kwargs: Any) -> None:
        if self.is_quiet():
            return
        # Paths and version strings must stay on one line
        kwargs.setdefault("soft_wrap", True)
        self.console.print(text, **kwargs)
