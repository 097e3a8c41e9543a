"""Tests covering filename and filesystem classification."""

from __future__ import annotations

import os
import socket
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from file_identify import (
    FileIdentifier,
    IdentifyOptions,
    InvalidPathError,
    PathNotFoundError,
    tags_from_filename,
    tags_from_path,
)
from file_identify.detection.permissions import is_executable

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="requires POSIX file modes")


def _make_executable(path: Path) -> None:
    os.chmod(path, 0o755)


# Filename-only identification ------------------------------------------------


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("file.py", {"text", "python"}),
        ("Dockerfile", {"text", "dockerfile"}),
        ("Dockerfile.xenial", {"text", "dockerfile"}),
        ("Makefile", {"text", "makefile"}),
        ("Cargo.toml", {"text", "toml", "cargo"}),
        ("README.md", {"text", "markdown", "plain-text"}),
        ("backup.tar.gz", {"binary", "gzip"}),
        ("image.JPG", {"binary", "image", "jpeg"}),
        ("Info.plist", {"plist"}),
        (".bashrc", {"text", "shell", "bash"}),
        ("random.cfg", {"text"}),
    ],
)
def test_tags_from_filename(filename: str, expected: set[str]) -> None:
    assert tags_from_filename(filename) == expected


def test_special_name_takes_precedence_over_extension() -> None:
    assert tags_from_filename("setup.cfg") == {"text", "ini"}
    assert "ini" not in tags_from_filename("other.cfg")


@pytest.mark.parametrize("filename", ["unknown.xyz", "noextension", "", ".hidden"])
def test_unrecognized_filenames_are_empty(filename: str) -> None:
    assert tags_from_filename(filename) == set()


def test_extension_lookup_is_case_insensitive() -> None:
    lower = tags_from_filename("image.jpg")

    assert lower == tags_from_filename("image.JPG") == tags_from_filename("image.JpG")


def test_directories_are_ignored_in_filenames() -> None:
    assert tags_from_filename(os.path.join("some", "dir.d", "setup.cfg")) == {"text", "ini"}


def test_tags_from_filename_is_stable() -> None:
    assert tags_from_filename("config.yaml") == tags_from_filename("config.yaml")


# Filesystem identification ---------------------------------------------------


def test_missing_path_raises(tmp_path: Path) -> None:
    missing = tmp_path / "nonexistent"

    with pytest.raises(PathNotFoundError, match="does not exist") as excinfo:
        tags_from_path(missing)

    assert excinfo.value.path == str(missing)


def test_invalid_bytes_path_raises() -> None:
    with pytest.raises(InvalidPathError):
        tags_from_path(b"/tmp/\xff\xfe")


def test_directory_is_only_directory(tmp_path: Path) -> None:
    assert tags_from_path(tmp_path) == {"directory"}


@posix_only
def test_symlinks_are_not_followed(tmp_path: Path) -> None:
    target = tmp_path / "target.py"
    target.write_text("print('hi')\n", encoding="utf-8")
    link = tmp_path / "link.py"
    link.symlink_to(target)
    broken = tmp_path / "broken"
    broken.symlink_to(tmp_path / "missing")

    assert tags_from_path(link) == {"symlink"}
    assert tags_from_path(broken) == {"symlink"}


@posix_only
def test_socket_is_only_socket(tmp_path: Path) -> None:
    path = tmp_path / "s"
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.bind(str(path))
        assert tags_from_path(path) == {"socket"}
    finally:
        sock.close()


def test_regular_text_file(tmp_path: Path) -> None:
    path = tmp_path / "notes"
    path.write_text("print('hello')", encoding="utf-8")

    assert tags_from_path(path) == {"file", "non-executable", "text"}


def test_binary_file(tmp_path: Path) -> None:
    path = tmp_path / "binary"
    path.write_bytes(bytes([0x7F, 0x45, 0x4C, 0x46, 0x02, 0x01, 0x01]))

    assert tags_from_path(path) == {"file", "non-executable", "binary"}


def test_empty_file_is_text(tmp_path: Path) -> None:
    path = tmp_path / "empty"
    path.write_bytes(b"")

    assert tags_from_path(path) == {"file", "non-executable", "text"}


def test_filename_tags_skip_content_sniffing(tmp_path: Path) -> None:
    path = tmp_path / "archive.zip"
    path.write_text("not really a zip", encoding="utf-8")

    assert tags_from_path(path) == {"file", "non-executable", "binary", "zip"}


@pytest.mark.parametrize(
    ("payload", "encoding"),
    [
        (b'<?xml version="1.0" encoding="UTF-8"?>\n<plist version="1.0"><dict/></plist>', "text"),
        (b"bplist00\xd1\x01\x02_\x10\x0f", "binary"),
    ],
)
def test_binary_check_extension_sniffs_content(
    tmp_path: Path, payload: bytes, encoding: str
) -> None:
    path = tmp_path / "test.plist"
    path.write_bytes(payload)

    assert tags_from_path(path) == {"file", "non-executable", "plist", encoding}


@posix_only
def test_executable_script_with_env_shebang(tmp_path: Path) -> None:
    script = tmp_path / "script"
    script.write_text("#!/usr/bin/env python3\nprint('hello')\n", encoding="utf-8")
    _make_executable(script)

    assert tags_from_path(script) == {"file", "executable", "python", "python3", "text"}


@posix_only
def test_executable_script_with_bash_shebang(tmp_path: Path) -> None:
    script = tmp_path / "run"
    script.write_text("#!/bin/bash\necho hello\n", encoding="utf-8")
    _make_executable(script)

    assert tags_from_path(script) == {"file", "executable", "shell", "bash", "text"}


@posix_only
def test_executable_with_extension_ignores_shebang(tmp_path: Path) -> None:
    script = tmp_path / "script.py"
    script.write_text("#!/bin/bash\necho hello\n", encoding="utf-8")
    _make_executable(script)

    assert tags_from_path(script) == {"file", "executable", "python", "text"}


def test_shebang_ignored_for_non_executable(tmp_path: Path) -> None:
    script = tmp_path / "script"
    script.write_text("#!/usr/bin/env python3\nprint('hello')\n", encoding="utf-8")
    os.chmod(script, 0o644)

    assert tags_from_path(script) == {"file", "non-executable", "text"}


@posix_only
def test_unknown_interpreter_falls_back_to_content(tmp_path: Path) -> None:
    script = tmp_path / "tool"
    script.write_text("#!/opt/custom/interp\nrun\n", encoding="utf-8")
    _make_executable(script)

    assert tags_from_path(script) == {"file", "executable", "text"}


# FileIdentifier builder ------------------------------------------------------


def test_default_identifier_matches_tags_from_path(tmp_path: Path) -> None:
    path = tmp_path / "test.py"
    path.write_text("print('hello')", encoding="utf-8")

    assert FileIdentifier().identify(path) == tags_from_path(path)
    assert FileIdentifier().identify(path) == {"file", "non-executable", "python", "text"}


def test_skip_content_analysis(tmp_path: Path) -> None:
    path = tmp_path / "unknown_file"
    path.write_text("some content", encoding="utf-8")

    tags = FileIdentifier().skip_content_analysis().identify(path)

    assert tags == {"file", "non-executable"}


def test_skip_content_analysis_keeps_table_encoding(tmp_path: Path) -> None:
    path = tmp_path / "test.py"
    path.write_text("print('hello')", encoding="utf-8")

    tags = FileIdentifier().skip_content_analysis().identify(path)

    assert tags == {"file", "non-executable", "python", "text"}


@posix_only
def test_skip_shebang_analysis(tmp_path: Path) -> None:
    script = tmp_path / "script"
    script.write_text("#!/usr/bin/env python3\nprint('hello')\n", encoding="utf-8")
    _make_executable(script)

    tags = FileIdentifier().skip_shebang_analysis().identify(script)

    assert tags == {"file", "executable", "text"}


def test_custom_extensions(tmp_path: Path) -> None:
    path = tmp_path / "test.myext"
    path.write_text("custom content", encoding="utf-8")

    identifier = FileIdentifier().with_custom_extensions({"MyExt": ["custom", "text"]})

    assert identifier.identify(path) == {"file", "non-executable", "custom", "text"}


def test_custom_extension_overrides_names_and_builtins(tmp_path: Path) -> None:
    path = tmp_path / "setup.cfg"
    path.write_text("[metadata]\n", encoding="utf-8")

    identifier = FileIdentifier().with_custom_extensions({"cfg": ["my-config"]})

    assert identifier.identify(path) == {"file", "non-executable", "my-config", "text"}


def test_custom_extensions_fall_back_for_other_files(tmp_path: Path) -> None:
    path = tmp_path / "Dockerfile"
    path.write_text("FROM scratch\n", encoding="utf-8")

    identifier = FileIdentifier().with_custom_extensions({"myext": ["custom"]})

    assert identifier.identify(path) == {"file", "non-executable", "dockerfile", "text"}


def test_builder_chaining_does_not_mutate(tmp_path: Path) -> None:
    path = tmp_path / "test.unknown"
    path.write_text("content", encoding="utf-8")

    base = FileIdentifier()
    configured = base.skip_content_analysis().skip_shebang_analysis()

    assert configured.options.skip_content_analysis
    assert configured.options.skip_shebang_analysis
    assert not base.options.skip_content_analysis
    assert configured.identify(path) == {"file", "non-executable"}
    assert base.identify(path) == {"file", "non-executable", "text"}


def test_identify_options_are_frozen() -> None:
    options = IdentifyOptions(custom_extensions={".TXT": frozenset({"plain"})})

    assert options.custom_extensions == {"txt": frozenset({"plain"})}
    with pytest.raises(ValidationError):
        options.skip_content_analysis = True  # type: ignore[misc]


def test_custom_extensions_cannot_be_mutated_after_build(tmp_path: Path) -> None:
    path = tmp_path / "test.myext"
    path.write_text("custom content", encoding="utf-8")
    identifier = FileIdentifier().with_custom_extensions({"myext": ["custom"]})

    with pytest.raises(TypeError):
        identifier.options.custom_extensions["myext"] = frozenset({"other"})  # type: ignore[index]

    assert identifier.identify(path) == {"file", "non-executable", "custom", "text"}


def test_identify_options_are_hashable() -> None:
    first = IdentifyOptions(custom_extensions={"myext": frozenset({"custom"})})
    second = FileIdentifier().with_custom_extensions({".MYEXT": ["custom"]}).options

    assert first == second
    assert hash(first) == hash(second)
    assert hash(IdentifyOptions()) == hash(IdentifyOptions())


def test_builder_keeps_custom_extensions_when_chaining() -> None:
    identifier = FileIdentifier().with_custom_extensions({"myext": ["custom"]})

    chained = identifier.skip_content_analysis()

    assert chained.options.custom_extensions == {"myext": frozenset({"custom"})}
    assert chained.options.skip_content_analysis


# Failure handling and platform rules -----------------------------------------


@posix_only
def test_shebang_read_failure_is_treated_as_no_shebang(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    script = tmp_path / "script"
    script.write_text("#!/usr/bin/env python3\nprint('hello')\n", encoding="utf-8")
    _make_executable(script)

    def _unreadable(path: str) -> tuple[str, ...]:
        raise OSError("permission denied")

    monkeypatch.setattr(
        "file_identify.detection.classifier.parse_shebang_from_file", _unreadable
    )

    assert tags_from_path(script) == {"file", "executable", "text"}


@pytest.mark.skipif(sys.platform != "linux", reason="requires byte-oriented filenames")
def test_non_utf8_basename_skips_filename_analysis(tmp_path: Path) -> None:
    path = tmp_path / os.fsdecode(b"caf\xff.py")
    path.write_text("print('hello')", encoding="utf-8")

    assert tags_from_path(str(path)) == {"file", "non-executable", "text"}


@pytest.mark.parametrize(
    ("filename", "executable"),
    [("tool.exe", True), ("RUN.BAT", True), ("setup.cmd", True), ("notes.txt", False)],
)
def test_windows_executability_follows_extension(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, filename: str, executable: bool
) -> None:
    path = tmp_path / filename
    path.write_text("content", encoding="utf-8")
    os.chmod(path, 0o644)
    monkeypatch.setattr(sys, "platform", "win32")

    assert is_executable(str(path), 0o755) is executable
    tags = FileIdentifier().skip_shebang_analysis().identify(path)
    assert ("executable" in tags) is executable
    assert ("non-executable" in tags) is not executable
