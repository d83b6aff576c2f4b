"""Command-line entry point.

Run with: git-profiles <command> [args...]  (or python -m git_profiles)
"""

import sys
from typing import Callable, Protocol

from git_profiles.applier import GitIdentityApplier, OutputFunc
from git_profiles.config import Config, get_config
from git_profiles.models import Result
from git_profiles.store import ProfileStore
from git_profiles.switcher import ReadLineFunc, select_and_apply

HELP_TEXT = """Available commands:
add <profileName> <name> <email> - Add a new profile
generate - Generate a new profiles file
switch - Switch to a different profile
update <profileName> <newName> <newEmail> - Update an existing profile
delete <profileName> - Delete an existing profile
view - View the contents of the config file
help - Show this help message"""


class CommandFunc(Protocol):
    """Protocol defining command handler signature."""

    def __call__(
        self,
        args: list[str],
        config: Config,
        write: OutputFunc,
        read_line: ReadLineFunc,
    ) -> None:
        """Run a command.

        Args:
            args: Arguments after the command name.
            config: Application configuration.
            write: Prints one line of output.
            read_line: Reads one line of interactive input.
        """
        ...


# Global command registry
COMMANDS: dict[str, CommandFunc] = {}


def register_command(name: str) -> Callable[[CommandFunc], CommandFunc]:
    """Decorator to register a handler for a command name."""

    def decorator(func: CommandFunc) -> CommandFunc:
        COMMANDS[name] = func
        return func

    return decorator


def get_command(name: str) -> CommandFunc | None:
    """Get the handler for a command, or None if not found."""
    return COMMANDS.get(name)


def _store(config: Config) -> ProfileStore:
    return ProfileStore(config.profiles_file)


def _report(result: Result, write: OutputFunc) -> None:
    write(result.message)


@register_command("help")
def handle_help(
    args: list[str], config: Config, write: OutputFunc, read_line: ReadLineFunc
) -> None:
    write(HELP_TEXT)


@register_command("generate")
def handle_generate(
    args: list[str], config: Config, write: OutputFunc, read_line: ReadLineFunc
) -> None:
    _report(_store(config).initialize_default(), write)


@register_command("switch")
def handle_switch(
    args: list[str], config: Config, write: OutputFunc, read_line: ReadLineFunc
) -> None:
    applier = GitIdentityApplier(config.git_executable, output=write)
    _report(select_and_apply(_store(config), applier, read_line, write), write)


@register_command("add")
def handle_add(
    args: list[str], config: Config, write: OutputFunc, read_line: ReadLineFunc
) -> None:
    if len(args) != 3:
        write("Usage: profile add <profileName> <name> <email>")
        return
    key, name, email = args
    _report(_store(config).add(key, name, email), write)


@register_command("update")
def handle_update(
    args: list[str], config: Config, write: OutputFunc, read_line: ReadLineFunc
) -> None:
    if len(args) != 3:
        write("Usage: profile update <profileName> <newName> <newEmail>")
        return
    key, new_name, new_email = args
    _report(_store(config).update(key, new_name, new_email), write)


@register_command("delete")
def handle_delete(
    args: list[str], config: Config, write: OutputFunc, read_line: ReadLineFunc
) -> None:
    if len(args) != 1:
        write("Usage: profile delete <profileName>")
        return
    _report(_store(config).delete(args[0]), write)


@register_command("view")
def handle_view(
    args: list[str], config: Config, write: OutputFunc, read_line: ReadLineFunc
) -> None:
    result = _store(config).view()
    write(result.content if result.ok else result.message)


def main(
    argv: list[str] | None = None,
    config: Config | None = None,
    write: OutputFunc = print,
    read_line: ReadLineFunc = input,
) -> int:
    """CLI entry point. Always returns 0; failures are reported as messages."""
    if argv is None:
        argv = sys.argv[1:]
    if config is None:
        config = get_config()

    if not argv:
        handle_help([], config, write, read_line)
        return 0

    name, args = argv[0], argv[1:]
    handler = get_command(name)
    if handler is None:
        write(f"Unknown command: {name}")
        return 0

    handler(args, config, write, read_line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
