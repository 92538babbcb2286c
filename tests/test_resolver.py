import os
from pathlib import Path

import pytest

from minish.core.resolver import ExecutableResolver, is_executable_file
from minish.errors import ResolutionError


class RecordingCheck:
    def __init__(self, executable: set[str]) -> None:
        self.executable = executable
        self.checked: list[str] = []

    def __call__(self, path: str) -> bool:
        self.checked.append(path)
        return path in self.executable


def test_direct_executable_never_consults_search_path() -> None:
    check = RecordingCheck({"./tool"})
    resolver = ExecutableResolver({"PATH": "/bin:/usr/bin"}, is_executable=check)
    assert resolver.resolve("./tool") == "./tool"
    assert check.checked == ["./tool"]


def test_search_path_is_checked_in_order() -> None:
    check = RecordingCheck({"/usr/bin/ls", "/opt/bin/ls"})
    resolver = ExecutableResolver({"PATH": "/bin:/usr/bin:/opt/bin"}, is_executable=check)
    assert resolver.resolve("ls") == "/usr/bin/ls"
    assert check.checked == ["ls", "/bin/ls", "/usr/bin/ls"]


def test_missing_everywhere_raises_resolution_error() -> None:
    check = RecordingCheck(set())
    resolver = ExecutableResolver({"PATH": "/bin:/usr/bin"}, is_executable=check)
    with pytest.raises(ResolutionError) as excinfo:
        resolver.resolve("nope")
    assert str(excinfo.value) == "nope: command not found"
    assert check.checked == ["nope", "/bin/nope", "/usr/bin/nope"]


def test_unset_search_path_only_checks_the_name() -> None:
    check = RecordingCheck(set())
    resolver = ExecutableResolver({}, is_executable=check)
    with pytest.raises(ResolutionError):
        resolver.resolve("ls")
    assert check.checked == ["ls"]


def test_empty_search_path_entries_are_skipped() -> None:
    check = RecordingCheck(set())
    resolver = ExecutableResolver({"PATH": "::/bin:"}, is_executable=check)
    assert resolver.search_path() == ["/bin"]


def test_failing_candidate_does_not_abort_search() -> None:
    def check(path: str) -> bool:
        if path.startswith("/locked/"):
            raise PermissionError(13, "Permission denied", path)
        return path == "/bin/ls"

    resolver = ExecutableResolver({"PATH": "/locked:/bin"}, is_executable=check)
    assert resolver.resolve("ls") == "/bin/ls"


def test_search_path_is_reread_on_every_resolution() -> None:
    environ = {"PATH": "/bin"}
    check = RecordingCheck({"/opt/bin/tool"})
    resolver = ExecutableResolver(environ, is_executable=check)
    with pytest.raises(ResolutionError):
        resolver.resolve("tool")
    environ["PATH"] = "/opt/bin"
    assert resolver.resolve("tool") == "/opt/bin/tool"


def test_is_executable_file_on_real_files(tmp_path: Path) -> None:
    script = tmp_path / "script.sh"
    script.write_text("#!/bin/sh\n")
    plain = tmp_path / "plain.txt"
    plain.write_text("")
    script.chmod(0o755)
    plain.chmod(0o644)
    assert is_executable_file(str(script)) is True
    assert is_executable_file(str(plain)) is False
    assert is_executable_file(str(tmp_path)) is False


def test_real_resolution_in_working_directory(tmp_path: Path, monkeypatch) -> None:
    script = tmp_path / "hello"
    script.write_text("#!/bin/sh\necho hi\n")
    script.chmod(0o755)
    monkeypatch.chdir(tmp_path)
    resolver = ExecutableResolver({"PATH": ""})
    assert resolver.resolve("hello") == "hello"
    assert os.path.isabs(resolver.resolve(str(script)))
