"""
Type definitions for Drush

This module provides:
- Service identifiers used by the facade
- Protocols for the container and every service reachable through it
"""
from typing import Protocol, TypeAlias, Any, List, Optional, runtime_checkable


# ============================================================================
# Service identifiers
# ============================================================================

ServiceID: TypeAlias = str

LOGGER: ServiceID = "logger"
CONFIG: ServiceID = "config"
INPUT: ServiceID = "input"
OUTPUT: ServiceID = "output"
COMMAND_FACTORY: ServiceID = "commandFactory"
BOOTSTRAP_MANAGER: ServiceID = "bootstrap.manager"
APPLICATION: ServiceID = "application"


# ============================================================================
# Container Protocol
# ============================================================================

@runtime_checkable
class ContainerProtocol(Protocol):
    """Anything that can hand out services by id"""

    def get(self, service_id: ServiceID) -> Any:
        """
        Return the service registered under service_id

        Raises:
            ServiceNotFoundError: If no such service exists
        """
        ...

    def has(self, service_id: ServiceID) -> bool:
        """Return True if a service is registered under service_id"""
        ...


# ============================================================================
# Service Protocols
# ============================================================================

@runtime_checkable
class LoggerProtocol(Protocol):
    """Leveled logger (logging.Logger satisfies it)"""

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None: ...


@runtime_checkable
class ConfigProtocol(Protocol):
    """Key-based configuration access"""

    def get(self, key: str, default: Any = None) -> Any: ...


@runtime_checkable
class InputProtocol(Protocol):
    """Parsed command line input"""

    def get_option(self, name: str) -> Any: ...


@runtime_checkable
class OutputProtocol(Protocol):
    """Console output with verbosity predicates"""

    def is_verbose(self) -> bool: ...

    def is_debug(self) -> bool: ...


@runtime_checkable
class CommandFactoryProtocol(Protocol):
    """Builds commands from a command file"""

    def create_commands(self, commandfile: Any) -> List[Any]: ...


@runtime_checkable
class BootProtocol(Protocol):
    """A bootstrap strategy selected by the bootstrap manager"""

    name: str

    def is_valid(self, root: Optional[str]) -> bool: ...

    def bootstrap(self) -> None: ...


@runtime_checkable
class BootstrapManagerProtocol(Protocol):
    """Selects and runs the boot object for the current site"""

    def bootstrap(self) -> BootProtocol: ...
