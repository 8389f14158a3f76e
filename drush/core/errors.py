"""
Exception types raised by the Drush core
"""
from typing import Optional


class DrushError(Exception):
    """Base class for every error raised by the Drush core"""


class ContainerNotInitializedError(DrushError, RuntimeError):
    """
    A guarded facade accessor was called before a container was installed.

    This is a wiring defect in the calling code, not a runtime condition to
    recover from.
    """

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "The Drush container is not initialized yet. "
               "facade.set_container() must be called with a real container."
        )


class ServiceNotFoundError(DrushError, LookupError):
    """The container has no service registered under the requested id"""

    def __init__(self, service_id: str):
        self.service_id = service_id
        super().__init__(f"Service '{service_id}' is not defined in the container")


class ServiceCapabilityError(DrushError, TypeError):
    """A service was found but does not provide the expected interface"""

    def __init__(self, service_id: str, expected: str, actual: object):
        self.service_id = service_id
        self.expected = expected
        super().__init__(
            f"Service '{service_id}' is a {type(actual).__name__}, "
            f"which does not implement {expected}"
        )


class VersionMetadataError(DrushError):
    """The version metadata file is missing, unreadable or malformed"""
