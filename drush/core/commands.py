"""
Command factory
Turns command files (modules or objects defining click commands) into commands
"""
from types import ModuleType
from typing import Any, List

import click


class CommandFactory:
    """Collects click commands from command files"""

    def create_commands(self, commandfile: Any) -> List[click.Command]:
        """
        Collect the click commands defined on a command file

        Args:
            commandfile: Module, class or instance whose attributes include
                click.Command objects

        Returns:
            Commands in definition order, each object listed once
        """
        if isinstance(commandfile, (ModuleType, type)):
            namespaces = [vars(commandfile)]
        else:
            namespaces = [vars(type(commandfile)), getattr(commandfile, "__dict__", {})]

        commands: List[click.Command] = []
        seen = set()
        for value in (v for ns in namespaces for v in ns.values()):
            if isinstance(value, click.Command) and id(value) not in seen:
                seen.add(id(value))
                commands.append(value)
        return commands

    def add_to(self, group: click.Group, commandfile: Any) -> List[click.Command]:
        """Register every command of a command file on a click group"""
        commands = self.create_commands(commandfile)
        for command in commands:
            group.add_command(command)
        return commands
