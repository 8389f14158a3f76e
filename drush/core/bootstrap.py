"""
Bootstrap module for Drush
Wires the services of one invocation and selects the boot object for the site

This module is the single place that builds a ServiceContainer; legacy code
reaches the result through the facade.
"""
from pathlib import Path
from typing import Any, Dict, List, Optional

from .commands import CommandFactory
from .config import Config, ConfigStore
from .console import ConsoleInput, ConsoleOutput, verbosity_from_flags
from .container import ServiceContainer
from . import types as service_ids
from ..utils.logger import get_logger, level_for_verbosity, set_level

logger = get_logger(__name__)


class Boot:
    """Base bootstrap strategy"""

    name = "base"

    def is_valid(self, root: Optional[str]) -> bool:
        return False

    def bootstrap(self) -> None:
        pass


class EmptyBoot(Boot):
    """Fallback boot used when no site is detected; does nothing"""

    name = "empty"

    def is_valid(self, root: Optional[str]) -> bool:
        return True


class DirectoryBoot(Boot):
    """Boot that applies when a marker file exists under the site root"""

    def __init__(self, name: str, marker: str):
        self.name = name
        self.marker = marker

    def is_valid(self, root: Optional[str]) -> bool:
        if not root:
            return False
        return (Path(root) / self.marker).exists()

    def bootstrap(self) -> None:
        logger.debug(f"Bootstrapping {self.name} using marker {self.marker}")


class BootstrapManager:
    """
    Selects the boot object for the current root and runs it

    The first boot whose is_valid() accepts the root wins; EmptyBoot is used
    when none does. Selection happens once per manager.
    """

    def __init__(self, boots: Optional[List[Boot]] = None, root: Optional[str] = None):
        self.boots: List[Boot] = list(boots or [])
        self.root = root
        self._selected: Optional[Boot] = None
        self._booted = False

    def select_boot(self) -> Boot:
        if self._selected is None:
            for boot in self.boots:
                if boot.is_valid(self.root):
                    self._selected = boot
                    break
            else:
                self._selected = EmptyBoot()
            logger.debug(f"Selected boot '{self._selected.name}' for root={self.root}")
        return self._selected

    def bootstrap(self) -> Boot:
        boot = self.select_boot()
        if not self._booted:
            boot.bootstrap()
            self._booted = True
        return boot


def build_container(
    application: Any,
    options: Optional[Dict[str, Any]] = None,
    *,
    verbose: int = 0,
    quiet: bool = False,
    debug: bool = False,
    boots: Optional[List[Boot]] = None,
) -> ServiceContainer:
    """
    Build the ServiceContainer for one invocation

    Args:
        application: The click group serving as the console application
        options: Parsed global options (simulate, root, ...)
        verbose: Number of -v flags
        quiet: --quiet was given
        debug: --debug was given
        boots: Candidate boot objects for the bootstrap manager

    Returns:
        ServiceContainer with every service the facade names
    """
    options = dict(options or {})
    verbosity = verbosity_from_flags(verbose, quiet, debug or Config.DEBUG)

    drush_logger = get_logger("drush")
    set_level(level_for_verbosity(verbosity))

    config = ConfigStore.from_env()
    for key, value in options.items():
        if value is not None:
            config.set(f"options.{key}", value)
    root = config.get("options.root")

    container = ServiceContainer()
    container.add(service_ids.LOGGER, drush_logger)
    container.add(service_ids.CONFIG, config)
    container.add(service_ids.INPUT, ConsoleInput(options))
    container.add(service_ids.OUTPUT, ConsoleOutput(verbosity))
    container.share(service_ids.COMMAND_FACTORY, CommandFactory)
    container.share(service_ids.BOOTSTRAP_MANAGER, lambda: BootstrapManager(boots, root=root))
    container.add(service_ids.APPLICATION, application)

    logger.debug(f"ServiceContainer built with services: {', '.join(container.ids())}")
    return container
