"""
Command runner for Drush
Dispatches a command line to the click application
"""
from enum import Enum
from typing import List, Optional

import click

from ..utils.logger import get_logger

logger = get_logger(__name__)


class RunnerState(Enum):
    """State of the runner"""
    IDLE = "idle"
    RUNNING = "running"
    FINISHED = "finished"


class Runner:
    """Runs the drush console application and reports its exit code"""

    def __init__(self):
        self.state = RunnerState.IDLE
        self.runs = 0

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the application for one command line

        Args:
            argv: Arguments without the program name (default: sys.argv[1:])

        Returns:
            Process exit code
        """
        # Deferred: the CLI module imports the facade, which owns this runner
        from ..cli.main import cli

        self.state = RunnerState.RUNNING
        self.runs += 1
        try:
            result = cli.main(args=argv, prog_name="drush", standalone_mode=False)
        except click.exceptions.Exit as exc:
            return exc.exit_code
        except click.ClickException as exc:
            exc.show()
            return exc.exit_code
        except click.Abort:
            click.echo("Aborted!", err=True)
            return 1
        finally:
            self.state = RunnerState.FINISHED
        logger.debug(f"Run {self.runs} finished with result {result!r}")
        return result if isinstance(result, int) else 0
