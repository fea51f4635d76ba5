"""Bobby CLI application.

This module provides the REPL that:
1. Loads the task list through TaskStorage
2. Reads lines with a prompt_toolkit PromptSession
3. Dispatches command words through the CommandRegistry
4. Saves the task list after changes and on exit
"""

from functools import partial
from typing import Callable

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.history import InMemoryHistory
from rich.console import Console

from bobby.cli.builtin_commands import BUILTIN_COMMANDS, FAREWELL
from bobby.cli.commands import CommandRegistry
from bobby.cli.session import ConsoleSession
from bobby.config import BobbySettings, get_settings
from bobby.errors import BobbyError
from bobby.logging import Loggers, bind_context, configure_logging
from bobby.persistence.storage import TaskStorage
from bobby.tasks.models import Task
from bobby.tasks.store import TaskList

logger = Loggers.cli()

GREETING = ("Hello! I'm Bobby", "What can I do for you?")
PROMPT = "> "


class CommandCompleter(Completer):
    """Completer for the command word at the start of the line."""

    def __init__(self, commands: list[str]) -> None:
        self.commands = sorted(commands)

    def get_completions(self, document: Document, complete_event):
        """Yield completions only while the first word is being typed."""
        text = document.text_before_cursor.lstrip()

        if " " in text:
            return

        partial = text.lower()
        for cmd in self.commands:
            if cmd.startswith(partial):
                yield Completion(cmd, start_position=-len(text))


class BobbyApp:
    """The Bobby task tracker REPL.

    Owns the TaskList for the lifetime of the session. Commands reach the
    list through ``app.tasks`` and print through ``app.session``.
    """

    def __init__(
        self,
        settings: BobbySettings | None = None,
        console: Console | None = None,
        storage: TaskStorage | None = None,
    ) -> None:
        """Initialize the application.

        Args:
            settings: Optional settings override
            console: Optional rich Console (tests pass one writing to a buffer)
            storage: Optional storage override; defaults to the settings' data file
        """
        self._settings = settings or get_settings()
        configure_logging(self._settings)

        self.session = ConsoleSession(console, separator_width=self._settings.separator_width)

        self.command_registry = CommandRegistry()
        self._register_builtin_commands()

        if storage is None and self._settings.persist:
            storage = TaskStorage(self._settings.data_path)
        self.storage = storage

        if self.storage is not None:
            bind_context(data_file=str(self.storage.path))
            self.tasks = self.storage.load()
        else:
            self.tasks = TaskList()

        self.should_exit = False

        logger.debug("app_initialized", tasks=self.tasks.count())

    @property
    def settings(self) -> BobbySettings:
        return self._settings

    def _register_builtin_commands(self) -> None:
        for command_cls in BUILTIN_COMMANDS:
            self.command_registry.register(command_cls())

    def stop(self) -> None:
        """Ask the REPL loop to finish after the current line."""
        self.should_exit = True

    def save(self) -> None:
        """Write the task list to storage, if persistence is enabled.

        Raises:
            StorageError: If the file cannot be written.
        """
        if self.storage is not None:
            self.storage.save(self.tasks)

    def add_task(self, description: str) -> Task:
        """Add a task and echo it."""
        task = Task(description)
        self.tasks.add(task)
        self.session.respond(f"added: {task.description}")
        return task

    def greet(self) -> None:
        self.session.respond(*GREETING)

    def process_input(self, user_input: str) -> None:
        """Process one line of user input.

        Errors raised by commands are printed and swallowed so the loop
        can continue.
        """
        user_input = user_input.strip()

        if not user_input:
            return

        parts = user_input.split(maxsplit=1)
        command = self.command_registry.get(parts[0])
        args = parts[1] if len(parts) > 1 else ""

        try:
            if command is None or not command.accepts(args):
                self.add_task(user_input)
                mutated = True
            else:
                logger.debug("executing_command", command=command.name, args=args)
                command.execute(args, self)
                mutated = command.mutates

            if mutated and self._settings.autosave:
                self.save()
        except BobbyError as e:
            logger.info("command_rejected", input=user_input, error=e.message)
            self.session.error(e.message)
        except Exception as e:
            logger.error("command_failed", input=user_input, error=str(e))
            self.session.error(f"Error executing command: {e}")

    def _create_prompt_session(self) -> PromptSession:
        completer = CommandCompleter(self.command_registry.get_completions())
        return PromptSession(
            history=InMemoryHistory(),
            completer=completer,
            complete_while_typing=False,
        )

    def run(self, read_line: Callable[[], str] | None = None) -> None:
        """Run the main application loop.

        Args:
            read_line: Optional line reader; defaults to a prompt_toolkit prompt.
        """
        logger.info("repl_starting", tasks=self.tasks.count())

        if read_line is None:
            prompt_session = self._create_prompt_session()
            read_line = partial(prompt_session.prompt, PROMPT)

        self.greet()
        try:
            while not self.should_exit:
                try:
                    line = read_line()
                except (EOFError, KeyboardInterrupt):
                    self.session.respond(FAREWELL)
                    break
                self.process_input(line)
        finally:
            try:
                self.save()
            except BobbyError as e:
                self.session.error(e.message)

        logger.info("app_ending", tasks=self.tasks.count())
