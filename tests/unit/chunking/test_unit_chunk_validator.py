# tests/unit/chunking/test_unit_chunk_validator.py
"""Tests for chunking/chunk_validator.py."""

from __future__ import annotations

import pytest

from conllukit.chunking.chunk_validator import (
    ChunkValidationError,
    ValidationResult,
    validate_chunks,
)
from conllukit.chunking.sentence_chunker import split_conllu


class TestValidateChunks:
    def test_valid_sequence(self, three_sentence_text: str):
        chunks = split_conllu(three_sentence_text, "doc", 5)
        result = validate_chunks(chunks, "doc", 5, source_text=three_sentence_text)
        assert result.valid
        assert result.errors == []

    def test_empty_list_warns(self):
        result = validate_chunks([], "doc", 5, source_text="")
        assert result.valid
        assert "Empty chunk list" in result.warnings

    def test_empty_list_for_non_empty_source_is_error(self):
        result = validate_chunks([], "doc", 5, source_text="1\ta\n")
        assert not result.valid

    def test_wrong_position(self, three_sentence_text: str):
        chunks = split_conllu(three_sentence_text, "doc", 5)
        chunks[1] = chunks[1].model_copy(update={"position": 5})
        result = validate_chunks(chunks, "doc", 5)
        assert not result.valid
        assert any("position" in e for e in result.errors)

    def test_gap_in_numbering(self, three_sentence_text: str):
        chunks = split_conllu(three_sentence_text, "doc", 5)
        chunks[2] = chunks[2].model_copy(update={"filename": "doc.004.conllu"})
        result = validate_chunks(chunks, "doc", 5)
        assert not result.valid
        assert any("doc.003.conllu" in e for e in result.errors)

    def test_duplicate_filename(self, three_sentence_text: str):
        chunks = split_conllu(three_sentence_text, "doc", 5)
        chunks[1] = chunks[1].model_copy(update={"filename": "doc.001.conllu"})
        result = validate_chunks(chunks, "doc", 5)
        assert any("Duplicate" in e for e in result.errors)

    def test_token_count_mismatch(self, three_sentence_text: str):
        chunks = split_conllu(three_sentence_text, "doc", 5)
        chunks[0] = chunks[0].model_copy(update={"token_count": 4})
        result = validate_chunks(chunks, "doc", 5)
        assert any("token_count" in e for e in result.errors)

    def test_sentence_count_mismatch(self, three_sentence_text: str):
        chunks = split_conllu(three_sentence_text, "doc", 5)
        chunks[2] = chunks[2].model_copy(update={"sentence_count": 2})
        result = validate_chunks(chunks, "doc", 5)
        assert any("sentence_count" in e for e in result.errors)

    def test_mid_sentence_close(self):
        text = "1\ta\n2\tb\n\n1\tc\n"
        chunks = split_conllu(text, "doc", 1)
        bad = chunks[0].model_copy(
            update={"content": "1\ta\n2\tb", "sentence_count": 0}
        )
        result = validate_chunks([bad, chunks[1]], "doc", 1)
        assert any("sentence boundary" in e for e in result.errors)

    def test_closed_below_target(self, three_sentence_text: str):
        chunks = split_conllu(three_sentence_text, "doc", 5)
        result = validate_chunks(chunks, "doc", 6)
        assert not result.valid
        assert any("below target" in e for e in result.errors)

    def test_threshold_ignored_for_non_positive_target(self, three_sentence_text: str):
        chunks = split_conllu(three_sentence_text, "doc", 5)
        assert validate_chunks(chunks, "doc", 0).valid

    def test_source_mismatch(self, three_sentence_text: str):
        chunks = split_conllu(three_sentence_text, "doc", 5)
        result = validate_chunks(chunks[:2], "doc", 5, source_text=three_sentence_text)
        assert any("rejoin" in e for e in result.errors)

    def test_empty_final_chunk_warns(self, build_conllu):
        text = build_conllu([2, 2]) + "\n"
        chunks = split_conllu(text, "doc", 2)
        result = validate_chunks(chunks, "doc", 2, source_text=text)
        assert result.valid
        assert any("no tokens" in w for w in result.warnings)


class TestValidationResult:
    def test_raise_for_errors(self):
        result = ValidationResult(valid=False, errors=["a", "b"])
        with pytest.raises(ChunkValidationError, match="a; b") as exc_info:
            result.raise_for_errors()
        assert exc_info.value.errors == ["a", "b"]

    def test_no_raise_when_valid(self):
        ValidationResult().raise_for_errors()
