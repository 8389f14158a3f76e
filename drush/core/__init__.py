"""
Core service container, bootstrap and facade
Provides the process-wide access point to the services of one invocation
"""
from .container import ServiceContainer
from .bootstrap import BootstrapManager, build_container
from .config import Config, ConfigStore
from .facade import DrushFacade, facade

__all__ = [
    "ServiceContainer",
    "BootstrapManager",
    "build_container",
    "Config",
    "ConfigStore",
    "DrushFacade",
    "facade",
]
