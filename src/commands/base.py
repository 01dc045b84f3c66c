"""Base command class and registry."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence, Tuple

from errors import UsageError
from product_search import ProductSearchService
from resource_names import ResourceLocation


class BaseCommand(ABC):
    """Base class for all commands."""

    #: Names of the positional parameters, in order.
    params: Tuple[str, ...] = ()

    @property
    @abstractmethod
    def name(self) -> str:
        """Command name (lowercase, e.g., 'get_product_set')."""
        pass

    @property
    @abstractmethod
    def help_text(self) -> str:
        """Brief help text for the command."""
        pass

    @property
    def usage(self) -> str:
        return " ".join([self.name] + [f"<{p}>" for p in self.params])

    def parse_args(self, args: Sequence[str]) -> List[str]:
        """Check positional arguments against `params`.

        Raises:
            UsageError: naming the first missing parameter, or listing extras.
        """
        if len(args) < len(self.params):
            missing = self.params[len(args)]
            raise UsageError(f"Missing required argument: {missing} (usage: {self.usage})")
        if len(args) > len(self.params):
            extra = " ".join(args[len(self.params):])
            raise UsageError(f"Unexpected argument(s): {extra} (usage: {self.usage})")
        return list(args)

    @abstractmethod
    def execute(self, api: ProductSearchService, location: ResourceLocation, *params: str) -> None:
        """Execute the command.

        Args:
            api: Product Search service
            location: Project and region the command operates in
            params: Parsed positional arguments, in `params` order
        """
        pass


class CommandRegistry:
    """Registry for all available commands."""

    def __init__(self):
        self._commands: Dict[str, BaseCommand] = {}

    def register(self, command: BaseCommand) -> None:
        """Register a command."""
        self._commands[command.name] = command

    def get(self, name: str) -> Optional[BaseCommand]:
        """Get a command by name."""
        return self._commands.get(name.lower())

    def list_commands(self) -> List[str]:
        """Get list of all command names."""
        return sorted(self._commands.keys())

    def resolve(self, argv: Sequence[str]) -> Tuple[BaseCommand, List[str]]:
        """Pick the command named by argv[0] and parse the rest as its params.

        Raises:
            UsageError: if no command is given, it is unknown, or its
                arguments don't match.
        """
        if not argv:
            raise UsageError("No command given")
        command = self.get(argv[0])
        if command is None:
            raise UsageError(f"Unknown command: {argv[0]}")
        return command, command.parse_args(argv[1:])

    def get_help(self) -> str:
        """Get help text for all commands."""
        lines = ["Available commands:"]
        for name in self.list_commands():
            cmd = self._commands[name]
            lines.append(f"  {cmd.usage} - {cmd.help_text}")
        lines.append("  help - Show this message")
        return "\n".join(lines)
