# tests/conftest.py
"""Shared test fixtures for all unit and integration tests.

Provides a CoNLL-U document builder, clean settings and temp directories.
"""

from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path
from typing import Callable

import pytest

from conllukit.config.settings import Settings
from conllukit.logging.context import clear_context


def _token_line(index: int) -> str:
    return "\t".join(
        [str(index), f"w{index}", f"w{index}", "NOUN", "_", "_", str(index - 1), "dep", "_", "_"]
    )


def _build_conllu(
    sizes: list[int],
    comments: bool = True,
    trailing_blank: bool = True,
) -> str:
    """Build a document with one sentence per entry in sizes.

    Each sentence is comment lines (optional), then its token lines, then one
    blank line. Lines are joined with '\\n', so the text ends with a single
    line feed when the last sentence keeps its blank line.
    """
    lines: list[str] = []
    for sent_no, n_tokens in enumerate(sizes, start=1):
        if comments:
            words = " ".join(f"w{i}" for i in range(1, n_tokens + 1))
            lines += [f"# sent_id = s{sent_no}", f"# text = {words}"]
        lines += [_token_line(i) for i in range(1, n_tokens + 1)]
        lines.append("")
    if not trailing_blank and lines:
        lines.pop()
    return "\n".join(lines)


# === FIXTURES: Sample data ===


@pytest.fixture
def build_conllu() -> Callable[..., str]:
    """Factory fixture: build_conllu([3, 2]) -> two sentences of 3 and 2 tokens."""
    return _build_conllu


@pytest.fixture
def two_sentence_text() -> str:
    """Sentences of 3 and 2 tokens, comments and trailing blank lines."""
    return _build_conllu([3, 2])


@pytest.fixture
def three_sentence_text() -> str:
    """Three sentences of 5 tokens each."""
    return _build_conllu([5, 5, 5])


@pytest.fixture
def read_zip() -> Callable[[bytes], dict[str, str]]:
    """Decode ZIP bytes into {entry name: text}, in archive order."""

    def _read(data: bytes) -> dict[str, str]:
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            return {name: zf.read(name).decode("utf-8") for name in zf.namelist()}

    return _read


# === FIXTURES: Settings ===


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any .env file."""
    return Settings(_env_file=None)


@pytest.fixture(autouse=True)
def _reset_logging():
    clear_context()
    yield
    clear_context()
    root = logging.getLogger("conllukit")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


# === FIXTURES: Temp dirs ===


@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Temporary output directory."""
    out = tmp_path / "output"
    out.mkdir()
    return out


@pytest.fixture
def conllu_file(tmp_path: Path, three_sentence_text: str) -> Path:
    """A three-sentence corpus written to disk as corpus.conllu."""
    path = tmp_path / "corpus.conllu"
    path.write_bytes(three_sentence_text.encode("utf-8"))
    return path
