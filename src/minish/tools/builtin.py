"""Built-in internal commands."""

from __future__ import annotations

from typing import cast

from minish.core.commands import CommandEntry, CommandOutput, ParseHook
from minish.core.types import ParsedArgs
from minish.tools import fileops
from minish.tools.registry import CommandRegistry


def _required(args: ParsedArgs, index: int = 0) -> str:
    # Parse hooks fill every required position.
    return cast(str, args.positional[index])


def show_command(args: ParsedArgs, output: CommandOutput) -> None:
    for chunk in fileops.read_text_chunks(_required(args)):
        output.write(chunk)


def copy_command(args: ParsedArgs, output: CommandOutput) -> None:
    fileops.copy_file(_required(args, 0), args.positional[1])


def append_command(args: ParsedArgs, output: CommandOutput) -> None:
    fileops.append_file(_required(args, 0), _required(args, 1))


def count_command(args: ParsedArgs, output: CommandOutput) -> None:
    output.write(f"{fileops.count_lines(_required(args))}\n")


def delete_command(args: ParsedArgs, output: CommandOutput) -> None:
    fileops.delete_file(_required(args))


def info_command(args: ParsedArgs, output: CommandOutput) -> None:
    output.write(fileops.format_file_info(fileops.get_file_info(_required(args))))


def list_command(args: ParsedArgs, output: CommandOutput) -> None:
    directory = _required(args)
    entries, failures = fileops.list_directory(directory)
    output.write(fileops.format_listing_row(directory, True))
    for entry in entries:
        output.write(fileops.format_listing_row(entry.name, entry.is_dir))
    for failure in failures:
        output.error(f"list: {failure.filename}: {failure.strerror or failure}")


def build_registry() -> CommandRegistry:
    """Build the fixed table of internal commands."""

    entries = [
        CommandEntry("show", ParseHook.SINGLE, show_command, "Display the contents of a file.", "show <file>"),
        CommandEntry(
            "copy",
            ParseHook.SOURCE_AND_OPTIONAL_TARGET,
            copy_command,
            f"Copy a file, by default to <file>{fileops.COPY_SUFFIX}.",
            "copy <file> [destination]",
        ),
        CommandEntry(
            "append",
            ParseHook.PAIR,
            append_command,
            "Append the contents of one file to another.",
            "append <source> <destination>",
        ),
        CommandEntry("count", ParseHook.SINGLE, count_command, "Count the lines of a file.", "count <file>"),
        CommandEntry("delete", ParseHook.SINGLE, delete_command, "Delete a file.", "delete <file>"),
        CommandEntry("info", ParseHook.SINGLE, info_command, "Display metadata of a file.", "info <file>"),
        CommandEntry(
            "list",
            ParseHook.OPTIONAL,
            list_command,
            "List a directory, by default the current one.",
            "list [directory]",
            default=".",
        ),
    ]

    help_rows: list[str] = []

    def help_command(_args: ParsedArgs, output: CommandOutput) -> None:
        output.write("".join(f"{row}\n" for row in help_rows))

    entries.append(CommandEntry("help", ParseHook.NONE, help_command, "List internal commands.", "help"))
    registry = CommandRegistry(entries)
    help_rows.extend(registry.compact_rows())
    return registry
