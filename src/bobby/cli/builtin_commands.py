"""Built-in commands for the REPL."""

from typing import Any

from rich.table import Table
from rich.text import Text

from bobby.cli.commands import Command, CommandCategory
from bobby.errors import CommandError
from bobby.tasks.models import Task

FAREWELL = "Bye. Hope to see you again soon!"


def _count_line(count: int) -> str:
    noun = "task" if count == 1 else "tasks"
    return f"Now you have {count} {noun} in the list."


def _numbered(tasks: list[Task]) -> list[str]:
    return [f"{number}. {task}" for number, task in enumerate(tasks, start=1)]


class ListCommand(Command):
    """List the active or archived tasks."""

    def __init__(self) -> None:
        super().__init__(
            name="list",
            description="Show your tasks",
            aliases=["ls"],
            usage="list [--archived]",
            examples=["list", "list --archived"],
            category=CommandCategory.TASKS,
        )

    def accepts(self, args: str) -> bool:
        return args.strip() in ("", "--archived")

    def execute(self, args: str, app: Any) -> None:
        parsed = self.parse_args(args)
        if parsed.has_flag("archived"):
            tasks = app.tasks.list_archived()
            if not tasks:
                app.session.respond("You have no archived tasks.")
                return
            app.session.respond("Here are your archived tasks:", *_numbered(tasks))
            return

        tasks = app.tasks.list_active()
        if not tasks:
            app.session.respond("Your list is empty!")
            return
        app.session.respond("Here are the tasks in your list:", *_numbered(tasks))


class TodoCommand(Command):
    """Add a task."""

    def __init__(self) -> None:
        super().__init__(
            name="todo",
            description="Add a task to your list",
            aliases=["add"],
            usage="todo <description>",
            examples=["todo read book"],
            category=CommandCategory.TASKS,
            mutates=True,
        )

    def execute(self, args: str, app: Any) -> None:
        description = args.strip()
        if not description:
            raise CommandError(f"The description of a task cannot be empty. Usage: {self.usage}")
        app.add_task(description)


class MarkCommand(Command):
    """Mark a task as done."""

    def __init__(self) -> None:
        super().__init__(
            name="mark",
            description="Mark a task as done",
            aliases=["done"],
            usage="mark <number>",
            examples=["mark 2"],
            category=CommandCategory.TASKS,
            mutates=True,
        )

    def execute(self, args: str, app: Any) -> None:
        number = self.parse_number(args)
        app.tasks.mark(number)
        task = app.tasks.get(number - 1)
        app.session.respond("Nice! I've marked this task as done:", f"  {task}")


class UnmarkCommand(Command):
    """Mark a task as not done."""

    def __init__(self) -> None:
        super().__init__(
            name="unmark",
            description="Mark a task as not done yet",
            aliases=["undo"],
            usage="unmark <number>",
            examples=["unmark 2"],
            category=CommandCategory.TASKS,
            mutates=True,
        )

    def execute(self, args: str, app: Any) -> None:
        number = self.parse_number(args)
        app.tasks.unmark(number)
        task = app.tasks.get(number - 1)
        app.session.respond("OK, I've marked this task as not done yet:", f"  {task}")


class DeleteCommand(Command):
    """Delete a task."""

    def __init__(self) -> None:
        super().__init__(
            name="delete",
            description="Remove a task from your list",
            aliases=["rm"],
            usage="delete <number>",
            examples=["delete 1"],
            category=CommandCategory.TASKS,
            mutates=True,
        )

    def execute(self, args: str, app: Any) -> None:
        number = self.parse_number(args)
        task = app.tasks.delete(number)
        app.session.respond(
            "Noted. I've removed this task:",
            f"  {task}",
            _count_line(app.tasks.count()),
        )


class FindCommand(Command):
    """Search active tasks by keyword."""

    def __init__(self) -> None:
        super().__init__(
            name="find",
            description="Find tasks whose description contains a keyword",
            aliases=["search"],
            usage="find <keyword>",
            examples=["find book"],
            category=CommandCategory.TASKS,
        )

    def execute(self, args: str, app: Any) -> None:
        keyword = args.strip()
        matches = app.tasks.find_matching(keyword)
        if not matches:
            app.session.respond(f'No tasks match "{keyword}".')
            return
        app.session.respond("Here are the matching tasks in your list:", *_numbered(matches))


class ArchiveCommand(Command):
    """Move a task from the list to the archive."""

    def __init__(self) -> None:
        super().__init__(
            name="archive",
            description="Move a task from your list to the archive",
            usage="archive <number>",
            examples=["archive 3"],
            category=CommandCategory.TASKS,
            mutates=True,
        )

    def execute(self, args: str, app: Any) -> None:
        number = self.parse_number(args)
        # TaskList.archive only appends, so remove from the active list first.
        task = app.tasks.delete(number)
        app.tasks.archive(task)
        app.session.respond(
            "Got it. I've archived this task:",
            f"  {task}",
            _count_line(app.tasks.count()),
        )


class HelpCommand(Command):
    """Display help information about available commands."""

    def __init__(self) -> None:
        super().__init__(
            name="help",
            description="Show available commands and usage information",
            aliases=["?"],
            usage="help [command]",
            examples=["help", "help mark"],
            category=CommandCategory.GENERAL,
        )

    def execute(self, args: str, app: Any) -> None:
        name = args.strip()
        if name:
            command = app.command_registry.get(name)
            if command is None:
                raise CommandError(f"Unknown command: {name}")
            app.session.respond(*command.get_help().splitlines())
            return

        table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
        table.add_column("Usage", style="bold cyan", no_wrap=True)
        table.add_column("Aliases", style="dim", no_wrap=True)
        table.add_column("Description")

        for category in CommandCategory:
            for cmd in app.command_registry.by_category(category):
                table.add_row(Text(cmd.usage), Text(", ".join(cmd.aliases)), Text(cmd.description))

        app.session.add_rich(table)


class ByeCommand(Command):
    """Exit the application."""

    def __init__(self) -> None:
        super().__init__(
            name="bye",
            description="Say goodbye and exit",
            aliases=["exit", "quit"],
            category=CommandCategory.GENERAL,
            accepts_args=False,
        )

    def execute(self, args: str, app: Any) -> None:
        app.session.respond(FAREWELL)
        app.stop()


BUILTIN_COMMANDS: tuple[type[Command], ...] = (
    ListCommand,
    TodoCommand,
    MarkCommand,
    UnmarkCommand,
    DeleteCommand,
    FindCommand,
    ArchiveCommand,
    HelpCommand,
    ByeCommand,
)
