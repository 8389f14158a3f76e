"""
Service Container
Holds the services wired for one Drush invocation
"""
import time
from typing import Any, Callable, Dict, List, Optional

from .errors import ServiceNotFoundError
from .types import ServiceID


class ServiceContainer:
    """
    Flat mapping of service ids to instances

    Services are either added as ready instances or shared as factories;
    a shared factory runs on the first get() and its result is reused.
    """

    def __init__(self, initialized_at: Optional[float] = None):
        self._instances: Dict[ServiceID, Any] = {}
        self._factories: Dict[ServiceID, Callable[[], Any]] = {}
        self.initialized_at = initialized_at if initialized_at is not None else time.time()

    def add(self, service_id: ServiceID, instance: Any) -> "ServiceContainer":
        """Register a ready instance, replacing any previous definition"""
        self._factories.pop(service_id, None)
        self._instances[service_id] = instance
        return self

    def share(self, service_id: ServiceID, factory: Callable[[], Any]) -> "ServiceContainer":
        """Register a factory whose result is built once and then reused"""
        self._instances.pop(service_id, None)
        self._factories[service_id] = factory
        return self

    def get(self, service_id: ServiceID) -> Any:
        if service_id in self._instances:
            return self._instances[service_id]
        factory = self._factories.get(service_id)
        if factory is None:
            raise ServiceNotFoundError(service_id)
        instance = factory()
        del self._factories[service_id]
        self._instances[service_id] = instance
        return instance

    def has(self, service_id: ServiceID) -> bool:
        return service_id in self._instances or service_id in self._factories

    def ids(self) -> List[ServiceID]:
        return sorted(set(self._instances) | set(self._factories))
