"""Command registry and base command class.

Every line typed at the prompt is split into a command word and an argument
string. The command word is looked up in the CommandRegistry; lines whose
first word is not a command are added as tasks by the app.

Example of creating a custom command:

    from bobby.cli.commands import Command, CommandCategory

    class CountCommand(Command):
        '''Show how many tasks are active.'''

        def __init__(self):
            super().__init__(
                name="count",
                description="Show the number of active tasks",
                usage="count",
                category=CommandCategory.TASKS,
            )

        def execute(self, args: str, app: Any) -> None:
            app.session.respond(f"You have {app.tasks.count()} tasks.")
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
import re

from bobby.errors import CommandError


class CommandCategory(Enum):
    """Categories for organizing commands."""

    GENERAL = "general"
    TASKS = "tasks"


@dataclass
class ParsedArgs:
    """Parsed command arguments.

    Provides easy access to positional arguments and options.
    """

    positional: str
    """Positional arguments (everything not an option)."""

    options: dict[str, str] = field(default_factory=dict)
    """Named options (--key=value or --flag)."""

    def has_flag(self, name: str) -> bool:
        """Check if a flag option is present."""
        return name in self.options


class Command(ABC):
    """Base class for commands.

    Subclass this and override execute(). Commands that change the task
    list set ``mutates=True`` so the app saves after they succeed.
    """

    def __init__(
        self,
        name: str,
        description: str,
        aliases: list[str] | None = None,
        usage: str | None = None,
        examples: list[str] | None = None,
        category: CommandCategory = CommandCategory.GENERAL,
        mutates: bool = False,
        accepts_args: bool = True,
    ) -> None:
        """Initialize the command.

        Args:
            name: Command word typed by the user
            description: Short description of what the command does
            aliases: Alternative command words
            usage: Usage string showing syntax (e.g., "mark <number>")
            examples: List of example usages
            category: Category for organizing in help
            mutates: Whether the command changes the task list
            accepts_args: Whether anything may follow the command word
        """
        self.name = name
        self.description = description
        self.aliases = aliases or []
        self.usage = usage or name
        self.examples = examples or []
        self.category = category
        self.mutates = mutates
        self.accepts_args = accepts_args

    @abstractmethod
    def execute(self, args: str, app: Any) -> None:
        """Execute the command with given arguments.

        Args:
            args: Argument string (everything after the command word)
            app: The BobbyApp instance

        Raises:
            BobbyError: For any problem the user should be told about.
        """
        pass

    def accepts(self, args: str) -> bool:
        """Whether a line with this argument string is meant for this command.

        Lines a command does not accept are added as tasks instead, so
        "quit smoking" is a task rather than a request to exit.
        """
        return self.accepts_args or not args.strip()

    def parse_args(self, args: str) -> ParsedArgs:
        """Parse command arguments into structured form.

        Parses options in the forms:
        - --key=value
        - --key value
        - --flag (boolean flag)

        Everything else is treated as positional arguments.
        """
        options: dict[str, str] = {}
        positional_parts: list[str] = []

        parts = self._tokenize(args)

        i = 0
        while i < len(parts):
            part = parts[i]

            if part.startswith("--"):
                key = part[2:]

                if "=" in key:
                    key, value = key.split("=", 1)
                    options[key] = value
                elif i + 1 < len(parts) and not parts[i + 1].startswith("-"):
                    options[key] = parts[i + 1]
                    i += 1
                else:
                    options[key] = "true"
            else:
                positional_parts.append(part)

            i += 1

        return ParsedArgs(
            positional=" ".join(positional_parts),
            options=options,
        )

    def parse_number(self, args: str) -> int:
        """Parse the task number a command was given.

        Raises:
            CommandError: If the argument is missing or not a whole number.
        """
        text = args.strip()
        if not text:
            raise CommandError(f"Please tell me which task number. Usage: {self.usage}")
        try:
            return int(text)
        except ValueError:
            raise CommandError(f"'{text}' is not a task number. Usage: {self.usage}") from None

    def _tokenize(self, args: str) -> list[str]:
        """Tokenize argument string respecting quotes."""
        pattern = r'"[^"]*"|\'[^\']*\'|\S+'
        tokens = re.findall(pattern, args)

        def strip_quotes(token: str) -> str:
            if len(token) >= 2 and token[0] in "\"'" and token[0] == token[-1]:
                return token[1:-1]
            return token

        return [strip_quotes(token) for token in tokens]

    def get_help(self) -> str:
        """Get detailed help text for this command."""
        lines = [
            f"{self.name}: {self.description}",
            f"Usage: {self.usage}",
        ]

        if self.aliases:
            lines.append(f"Aliases: {', '.join(self.aliases)}")

        if self.examples:
            lines.append("Examples:")
            for example in self.examples:
                lines.append(f"  {example}")

        return "\n".join(lines)


class CommandRegistry:
    """Registry for managing commands.

    Lookup is case-insensitive.
    """

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._categories: dict[CommandCategory, list[Command]] = {
            cat: [] for cat in CommandCategory
        }

    def register(self, command: Command) -> None:
        """Register a command and its aliases."""
        self._commands[command.name.lower()] = command
        for alias in command.aliases:
            self._commands[alias.lower()] = command

        if command not in self._categories[command.category]:
            self._categories[command.category].append(command)

    def get(self, name: str) -> Command | None:
        """Get a command by name or alias."""
        return self._commands.get(name.lower())

    def by_category(self, category: CommandCategory) -> list[Command]:
        """Get commands in a specific category."""
        return self._categories.get(category, [])

    def get_completions(self) -> list[str]:
        """Get all command names and aliases for auto-completion."""
        return list(self._commands.keys())
