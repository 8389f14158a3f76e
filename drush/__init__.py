"""
Drush - command line shell for site administration
"""
from .core.facade import DrushFacade, facade

__all__ = ["DrushFacade", "facade"]
