"""Tests for the console entry point."""

import logging

from checkie.app import main


class TestMain:
    def test_invalid_rows(self, caplog) -> None:
        with caplog.at_level(logging.ERROR):
            assert main(["9"]) == 2
        assert "rows" in caplog.text.lower()

    def test_non_numeric_rows(self) -> None:
        assert main(["many"]) == 2

    def test_self_play_with_config_file(self, tmp_path, monkeypatch, caplog) -> None:
        config = tmp_path / "rate.toml"
        config.write_text("max_depth = 0\n", encoding="utf-8")
        monkeypatch.setenv("CHECKIE_CONFIG", str(config))

        with caplog.at_level(logging.INFO):
            assert main(["1"]) == 0
        assert "won!" in caplog.text or "Draw" in caplog.text

    def test_broken_config_file(self, tmp_path, monkeypatch) -> None:
        config = tmp_path / "rate.toml"
        config.write_text("max_depth = -1\n", encoding="utf-8")
        monkeypatch.setenv("CHECKIE_CONFIG", str(config))
        assert main(["1"]) == 2

    def test_unknown_log_level(self, monkeypatch, caplog) -> None:
        monkeypatch.setenv("CHECKIE_LOG_LEVEL", "chatty")
        with caplog.at_level(logging.ERROR):
            assert main(["1"]) == 2
        assert "Unknown log level: CHATTY" in caplog.text
