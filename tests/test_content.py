"""Tests for text/binary content sniffing."""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from file_identify import file_is_text, is_text


@pytest.mark.parametrize(
    "data",
    [
        b"",
        b"hello world",
        b"line one\r\nline two\ttabbed\x0b\x0c\x1b[0m\x07\x08",
        "éóñəå  ⊂(◉‿◉)つ(ノ≥∇≤)ノ".encode("utf-8"),
        r"¯\_(ツ)_/¯".encode("utf-8"),
        "♪┏(・o･)┛♪┗ ( ･o･) ┓♪".encode("utf-8"),
        bytes(range(0x80, 0x100)),
    ],
)
def test_is_text(data: bytes) -> None:
    assert is_text(io.BytesIO(data)) is True


@pytest.mark.parametrize(
    "data",
    [
        b"hello\x00world",
        bytes([0x7F, 0x45, 0x4C, 0x46, 0x02, 0x01, 0x01]),
        bytes([0x43, 0x92, 0xD9, 0x0F, 0xAF, 0x32, 0x2C]),
        b"text\x1fmore",
    ],
)
def test_is_binary(data: bytes) -> None:
    assert is_text(io.BytesIO(data)) is False


def test_only_first_kilobyte_is_inspected() -> None:
    assert is_text(io.BytesIO(b"a" * 1024 + b"\x00")) is True
    assert is_text(io.BytesIO(b"a" * 1023 + b"\x00")) is False


def test_file_is_text(tmp_path: Path) -> None:
    text_path = tmp_path / "text.txt"
    text_path.write_text("Hello, world!", encoding="utf-8")
    binary_path = tmp_path / "binary"
    binary_path.write_bytes(bytes([0x7F, 0x45, 0x4C, 0x46, 0x00]))

    assert file_is_text(text_path) is True
    assert file_is_text(binary_path) is False


def test_file_is_text_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        file_is_text(tmp_path / "missing")
