"""
Service facade for Drush
Global access point to the services of the current invocation

Drush is moving towards constructor injection. This facade exists only for
legacy code paths that cannot receive their collaborators as parameters:

    # Legacy code
    facade.service("label")

    # Preferred: dedicated accessors carry the service interface
    facade.logger().info("...")

The facade assumes single-threaded use (one CLI invocation per process) and
performs no locking. Whoever calls set_container() is responsible for the
matching unset_container(), tests included.
"""
import sys
import traceback
from pathlib import Path
from typing import Any, Optional, Type, Union

from .errors import ContainerNotInitializedError, ServiceCapabilityError, VersionMetadataError
from .runner import Runner
from .types import (
    APPLICATION,
    BOOTSTRAP_MANAGER,
    COMMAND_FACTORY,
    CONFIG,
    INPUT,
    LOGGER,
    OUTPUT,
    BootProtocol,
    BootstrapManagerProtocol,
    CommandFactoryProtocol,
    ConfigProtocol,
    ContainerProtocol,
    InputProtocol,
    LoggerProtocol,
    OutputProtocol,
    ServiceID,
)
from .version import normalize_version, read_info_file
from ..utils.logger import get_logger

logger = get_logger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent.parent
INFO_FILE = PACKAGE_DIR / "drush.info"
BASE_PATH = PACKAGE_DIR.parent
VERSION_KEY = "drush_version"


class DrushFacade:
    """
    Holds the active container, the version cache and the runner

    The container reference is borrowed: the embedding application builds
    it, installs it with set_container() and clears it with unset_container().
    """

    def __init__(
        self,
        info_file: Union[str, Path] = INFO_FILE,
        base_path: Union[str, Path] = BASE_PATH,
    ):
        self._info_file = Path(info_file)
        self._base_path = Path(base_path)
        self._container: Optional[ContainerProtocol] = None
        self._runner: Optional[Runner] = None
        self._version: Optional[str] = None
        self._major_version: Optional[str] = None
        self._minor_version: Optional[str] = None

    # ------------------------------------------------------------------
    # Version
    # ------------------------------------------------------------------
    def get_version(self) -> str:
        """
        Return the current Drush version

        Called before any container exists; must not log or look up services.
        """
        if self._version is None:
            info = read_info_file(self._info_file)
            if VERSION_KEY not in info:
                raise VersionMetadataError(f"{self._info_file} has no '{VERSION_KEY}' entry")
            self._version = normalize_version(info[VERSION_KEY], self._base_path)
        return self._version

    def get_major_version(self) -> str:
        if self._major_version is None:
            self._major_version = self.get_version().split(".")[0]
        return self._major_version

    def get_minor_version(self) -> str:
        if self._minor_version is None:
            parts = self.get_version().split(".")
            if len(parts) < 2:
                raise VersionMetadataError(f"Version '{self._version}' has no minor component")
            self._minor_version = parts[1]
        return self._minor_version

    def reset_version_cache(self) -> None:
        """Forget the cached version so the next call re-reads the info file (tests only)"""
        self._version = None
        self._major_version = None
        self._minor_version = None

    # ------------------------------------------------------------------
    # Container lifecycle
    # ------------------------------------------------------------------
    def set_container(self, container: ContainerProtocol) -> None:
        """Replace the active container; services fetched earlier are not carried over"""
        self._container = container
        logger.debug(f"Container installed: {type(container).__name__}")

    def unset_container(self) -> None:
        if self._container is not None:
            logger.debug("Container removed")
        self._container = None

    def has_container(self) -> bool:
        return self._container is not None

    def get_container(self) -> ContainerProtocol:
        """
        Return the active container

        Raises:
            ContainerNotInitializedError: If set_container() has not been called
        """
        if self._container is None:
            traceback.print_stack(file=sys.stderr)
            raise ContainerNotInitializedError()
        return self._container

    # ------------------------------------------------------------------
    # Service lookup
    # ------------------------------------------------------------------
    def service(self, service_id: ServiceID) -> Any:
        """
        Retrieve a service from the container

        Prefer the dedicated accessors below when one exists. Errors raised by
        the container for unknown ids are propagated unchanged.
        """
        return self.get_container().get(service_id)

    def has_service(self, service_id: ServiceID) -> bool:
        # Check has_container() first in order to always return a bool
        return self.has_container() and bool(self.get_container().has(service_id))

    def _typed_service(self, service_id: ServiceID, protocol: Type) -> Any:
        service = self.service(service_id)
        if not isinstance(service, protocol):
            raise ServiceCapabilityError(service_id, protocol.__name__, service)
        return service

    def logger(self) -> LoggerProtocol:
        return self._typed_service(LOGGER, LoggerProtocol)

    def config(self) -> ConfigProtocol:
        return self._typed_service(CONFIG, ConfigProtocol)

    def input(self) -> InputProtocol:
        return self._typed_service(INPUT, InputProtocol)

    def output(self) -> OutputProtocol:
        return self._typed_service(OUTPUT, OutputProtocol)

    def command_factory(self) -> CommandFactoryProtocol:
        return self._typed_service(COMMAND_FACTORY, CommandFactoryProtocol)

    def bootstrap_manager(self) -> BootstrapManagerProtocol:
        return self._typed_service(BOOTSTRAP_MANAGER, BootstrapManagerProtocol)

    def bootstrap(self) -> BootProtocol:
        return self.bootstrap_manager().bootstrap()

    def application(self) -> Any:
        """Return the console application (the root click group)"""
        return self.service(APPLICATION)

    # ------------------------------------------------------------------
    # Mode queries; safe before the container is wired
    # ------------------------------------------------------------------
    def simulate(self) -> bool:
        if not self.has_service(INPUT):
            return False
        return bool(self.input().get_option("simulate"))

    def verbose(self) -> bool:
        if not self.has_service(OUTPUT):
            return False
        return bool(self.output().is_verbose())

    def debug(self) -> bool:
        if not self.has_service(OUTPUT):
            return False
        return bool(self.output().is_debug())

    # ------------------------------------------------------------------
    # Runner
    # ------------------------------------------------------------------
    def runner(self) -> Runner:
        if self._runner is None:
            self._runner = Runner()
        return self._runner


# Process-wide instance used by legacy code; single-threaded use only
facade = DrushFacade()
