"""Tests for the binary sniffer."""

from __future__ import annotations

from pathlib import Path

from file_extractor.core.sniff import SNIFF_BYTES, looks_binary


class TestLooksBinary:
    def test_plain_text_is_not_binary(self, tmp_path: Path):
        p = tmp_path / "a.txt"
        p.write_text("hello\nworld\n", encoding="utf-8")
        assert looks_binary(p) is False

    def test_empty_file_is_not_binary(self, tmp_path: Path):
        p = tmp_path / "empty.txt"
        p.write_bytes(b"")
        assert looks_binary(p) is False

    def test_nul_in_prefix_is_binary(self, tmp_path: Path):
        p = tmp_path / "b.bin"
        p.write_bytes(b"0123456789\x00rest")
        assert looks_binary(p) is True

    def test_nul_at_last_sniffed_byte_is_binary(self, tmp_path: Path):
        p = tmp_path / "edge.dat"
        p.write_bytes(b"a" * (SNIFF_BYTES - 1) + b"\x00")
        assert looks_binary(p) is True

    def test_nul_after_prefix_is_not_seen(self, tmp_path: Path):
        p = tmp_path / "late.dat"
        p.write_bytes(b"a" * SNIFF_BYTES + b"\x00tail")
        assert looks_binary(p) is False

    def test_non_utf8_without_nul_is_text(self, tmp_path: Path):
        p = tmp_path / "latin1.txt"
        p.write_bytes("café".encode("latin-1"))
        assert looks_binary(p) is False

    def test_missing_file_is_not_binary(self, tmp_path: Path):
        assert looks_binary(tmp_path / "does-not-exist") is False

    def test_directory_is_not_binary(self, tmp_path: Path):
        assert looks_binary(tmp_path) is False
