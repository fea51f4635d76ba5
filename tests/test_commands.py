"""Tests for command registry and base command class."""

from unittest.mock import MagicMock

import pytest

from bobby.cli.builtin_commands import BUILTIN_COMMANDS, ByeCommand, ListCommand
from bobby.cli.commands import Command, CommandCategory, CommandRegistry
from bobby.errors import CommandError


class MockCommand(Command):
    """Mock command for testing."""

    def __init__(
        self,
        name: str = "test",
        description: str = "Test command",
        aliases: list[str] | None = None,
        category: CommandCategory = CommandCategory.GENERAL,
    ):
        super().__init__(name, description, aliases, category=category)
        self.executed = False
        self.last_args = None

    def execute(self, args: str, app) -> None:
        self.executed = True
        self.last_args = args


class TestCommand:

    def test_initialization_defaults(self):
        cmd = MockCommand("bye", "Exit")
        assert cmd.aliases == []
        assert cmd.usage == "bye"
        assert cmd.mutates is False

    def test_execute(self):
        cmd = MockCommand()
        cmd.execute("arg1 arg2", MagicMock())
        assert cmd.executed
        assert cmd.last_args == "arg1 arg2"

    def test_parse_args_flag(self):
        parsed = MockCommand().parse_args("--archived")
        assert parsed.positional == ""
        assert parsed.has_flag("archived")

    def test_parse_args_options_and_positional(self):
        parsed = MockCommand().parse_args('read "big book" --limit=3 --sort name')
        assert parsed.positional == "read big book"
        assert parsed.options == {"limit": "3", "sort": "name"}

    @pytest.mark.parametrize("text, expected", [("2", 2), (" 10 ", 10), ("-1", -1), ("0", 0)])
    def test_parse_number(self, text, expected):
        assert MockCommand().parse_number(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "two", "1.5", "1 2"])
    def test_parse_number_rejects(self, text):
        with pytest.raises(CommandError):
            MockCommand().parse_number(text)

    def test_get_help(self):
        cmd = MockCommand("mark", "Mark a task", aliases=["done"])
        cmd.usage = "mark <number>"
        cmd.examples = ["mark 2"]
        text = cmd.get_help()
        assert "mark: Mark a task" in text
        assert "Usage: mark <number>" in text
        assert "Aliases: done" in text
        assert "  mark 2" in text


class TestCommandRegistry:

    def test_empty_registry(self):
        registry = CommandRegistry()
        assert registry.get("nonexistent") is None
        assert registry.get_completions() == []

    def test_register_with_aliases(self):
        registry = CommandRegistry()
        cmd = MockCommand("bye", "Exit", aliases=["exit", "quit"])
        registry.register(cmd)

        assert registry.get("bye") is cmd
        assert registry.get("exit") is cmd
        assert registry.get("quit") is cmd
        assert set(registry.get_completions()) == {"bye", "exit", "quit"}

    def test_lookup_is_case_insensitive(self):
        registry = CommandRegistry()
        cmd = MockCommand("list", "List")
        registry.register(cmd)
        assert registry.get("LIST") is cmd

    def test_by_category(self):
        registry = CommandRegistry()
        general = MockCommand("help", "Help")
        tasks = MockCommand("list", "List", category=CommandCategory.TASKS)
        registry.register(general)
        registry.register(tasks)
        assert registry.by_category(CommandCategory.TASKS) == [tasks]
        assert registry.by_category(CommandCategory.GENERAL) == [general]

    def test_aliases_listed_once_per_category(self):
        registry = CommandRegistry()
        cmd = MockCommand("bye", "Exit", aliases=["exit", "quit"])
        registry.register(cmd)
        assert registry.by_category(CommandCategory.GENERAL) == [cmd]


class TestBuiltinCommands:

    def test_names_are_unique(self):
        registry = CommandRegistry()
        words: list[str] = []
        for command_cls in BUILTIN_COMMANDS:
            cmd = command_cls()
            words.extend([cmd.name, *cmd.aliases])
            registry.register(cmd)
        assert len(words) == len(set(words))
        assert len(registry.by_category(CommandCategory.GENERAL)) + len(
            registry.by_category(CommandCategory.TASKS)
        ) == len(BUILTIN_COMMANDS)

    def test_mutating_commands(self):
        mutating = {cls().name for cls in BUILTIN_COMMANDS if cls().mutates}
        assert mutating == {"todo", "mark", "unmark", "delete", "archive"}

    def test_commands_accept_arguments_by_default(self):
        cmd = MockCommand()
        assert cmd.accepts_args is True
        assert cmd.accepts("anything at all")

    @pytest.mark.parametrize("args, accepted", [("", True), ("  ", True), ("smoking", False)])
    def test_bye_takes_no_arguments(self, args, accepted):
        assert ByeCommand().accepts(args) is accepted

    @pytest.mark.parametrize(
        "args, accepted",
        [("", True), ("--archived", True), (" --archived ", True), ("of groceries", False)],
    )
    def test_list_only_takes_archived_flag(self, args, accepted):
        assert ListCommand().accepts(args) is accepted
