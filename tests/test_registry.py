import pytest

from minish.core.commands import CommandEntry, ParseHook
from minish.core.tokenizer import tokenize
from minish.core.types import ParsedArgs
from minish.errors import UnknownCommandError
from minish.tools.registry import CommandRegistry


def _entry(name: str, handler=None, hook: ParseHook = ParseHook.SINGLE) -> CommandEntry:
    def _noop(_args: ParsedArgs, _output) -> None:
        return None

    return CommandEntry(name, hook, handler or _noop, f"{name} summary", f"{name} <file>")


def test_identify_is_exact_and_case_sensitive() -> None:
    registry = CommandRegistry([_entry("show")])
    assert registry.identify("show").name == "show"
    with pytest.raises(UnknownCommandError) as excinfo:
        registry.identify("Show")
    assert str(excinfo.value) == "unknown command: Show"


def test_get_and_has_do_not_raise() -> None:
    registry = CommandRegistry([_entry("show")])
    assert registry.has("show") is True
    assert "show" in registry
    assert registry.get("missing") is None
    assert registry.has("missing") is False


def test_duplicate_names_are_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate internal command: show"):
        CommandRegistry([_entry("show"), _entry("show")])


def test_registry_is_read_only() -> None:
    registry = CommandRegistry([_entry("show")])
    assert not hasattr(registry, "register")
    with pytest.raises(TypeError):
        registry._entries["other"] = _entry("other")  # type: ignore[index]


def test_compact_rows_are_sorted_and_aligned() -> None:
    registry = CommandRegistry([_entry("show"), _entry("cp")])
    assert registry.compact_rows() == ["cp    cp summary", "show  show summary"]


def test_execute_runs_parse_hook_then_handler(output) -> None:
    seen: list[ParsedArgs] = []

    def handler(args: ParsedArgs, out) -> None:
        seen.append(args)
        out.write("done\n")

    registry = CommandRegistry([_entry("show", handler)])
    result = registry.execute(registry.identify("show"), tokenize("show file.txt extra", 8), output)
    assert result.ok
    assert result.command == "show file.txt extra"
    assert seen == [ParsedArgs(positional=("file.txt",))]
    assert output.text == "done\n"


def test_execute_reports_usage_errors_without_calling_handler(output) -> None:
    called = {"handler": False}

    def handler(_args: ParsedArgs, _out) -> None:
        called["handler"] = True

    registry = CommandRegistry([_entry("show", handler)])
    result = registry.execute(registry.identify("show"), tokenize("show", 8), output)
    assert result.status == "error"
    assert result.output == "usage: show <file>"
    assert called["handler"] is False


def test_execute_converts_os_errors(output) -> None:
    def handler(_args: ParsedArgs, _out) -> None:
        raise FileNotFoundError(2, "No such file or directory", "missing.txt")

    registry = CommandRegistry([_entry("show", handler)])
    result = registry.execute(registry.identify("show"), tokenize("show missing.txt", 8), output)
    assert result.status == "error"
    assert result.output == "missing.txt: No such file or directory"


def test_execute_help_flag_prints_usage(output) -> None:
    registry = CommandRegistry([_entry("show")])
    result = registry.execute(registry.identify("show"), tokenize("show --help", 8), output)
    assert result.ok
    assert output.text == "usage: show <file>\nshow summary\n"


def test_execute_logs_start_and_end(monkeypatch, output) -> None:
    logs: list[str] = []

    def _capture(message: str, *args: object) -> None:
        logs.append(message)

    monkeypatch.setattr("minish.tools.registry.logger.info", _capture)
    registry = CommandRegistry([_entry("show")])
    registry.execute(registry.identify("show"), tokenize("show a", 8), output)
    assert logs.count("command.call.start name={} {{ {} }}") == 1
    assert logs.count("command.call.end name={} duration={:.3f}ms") == 1
