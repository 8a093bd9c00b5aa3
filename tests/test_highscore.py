"""Tests for high score persistence."""

import logging

import pytest

from snake.highscore import FileHighscoreStore, MemoryHighscoreStore


class TestFileHighscoreStore:

    def test_missing_file_reads_zero(self, tmp_path):
        assert FileHighscoreStore(tmp_path / "nope.txt").load() == 0

    def test_save_then_load(self, tmp_path):
        store = FileHighscoreStore(tmp_path / "highscore.txt")
        store.save(150)
        assert store.load() == 150
        assert (tmp_path / "highscore.txt").read_text() == "150"

    def test_save_overwrites(self, tmp_path):
        store = FileHighscoreStore(tmp_path / "highscore.txt")
        store.save(999)
        store.save(40)
        assert store.load() == 40

    def test_trailing_whitespace_is_fine(self, tmp_path):
        path = tmp_path / "highscore.txt"
        path.write_text("  320\n")
        assert FileHighscoreStore(path).load() == 320

    def test_garbage_reads_zero(self, tmp_path):
        path = tmp_path / "highscore.txt"
        path.write_text("not a number")
        assert FileHighscoreStore(path).load() == 0

    def test_empty_file_reads_zero(self, tmp_path):
        path = tmp_path / "highscore.txt"
        path.write_text("")
        assert FileHighscoreStore(path).load() == 0

    def test_negative_reads_zero(self, tmp_path):
        path = tmp_path / "highscore.txt"
        path.write_text("-30")
        assert FileHighscoreStore(path).load() == 0

    @pytest.mark.parametrize("content", ["1_000", "+5", "12.5", "0x10"])
    def test_only_plain_digits_accepted(self, tmp_path, content):
        """Python-only integer spellings are not decimal ASCII."""
        path = tmp_path / "highscore.txt"
        path.write_text(content)
        assert FileHighscoreStore(path).load() == 0

    def test_binary_junk_reads_zero(self, tmp_path):
        path = tmp_path / "highscore.txt"
        path.write_bytes(b"\xff\xfe\x00")
        assert FileHighscoreStore(path).load() == 0

    def test_write_failure_is_logged_not_raised(self, tmp_path, caplog):
        """A directory in place of the file makes the write fail."""
        store = FileHighscoreStore(tmp_path)
        with caplog.at_level(logging.WARNING, logger="snake.highscore"):
            store.save(10)
        assert "Could not save high score" in caplog.text

    def test_default_path(self):
        assert FileHighscoreStore().path.name == "highscore.txt"


class TestMemoryHighscoreStore:

    def test_round_trip_and_counts_saves(self):
        store = MemoryHighscoreStore()
        assert store.load() == 0
        store.save(150)
        assert store.load() == 150
        assert store.saves == 1
