"""Tests for warble.cli — CLI entrypoint and argument parsing."""

import pytest

from warble.cli import main


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_search_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["search", "--help"])
        assert exc_info.value.code == 0


class TestCLIBadArgs:
    def test_unknown_backend(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["search", "glove", "--backend", "grpc"])
        assert exc_info.value.code == 2

    def test_latency_needs_two_values(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["search", "glove", "--latency", "0.1"])
        assert exc_info.value.code == 2

    def test_bad_log_level_in_env(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("WARBLE_LOG_LEVEL", "bogus")
        with pytest.raises(SystemExit) as exc_info:
            main(["search", "glove"])
        assert exc_info.value.code == 1
        assert "Error: Unknown log level 'bogus'" in capsys.readouterr().err


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert "warble" in captured.out


class TestCLISearch:
    def test_simulated_search(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.delenv("WARBLE_BACKEND", raising=False)
        monkeypatch.delenv("WARBLE_LATENCY", raising=False)
        with pytest.raises(SystemExit) as exc_info:
            main(["search", "Baseball glove"])
        assert exc_info.value.code == 0

        out = capsys.readouterr().out
        assert "SearchActions.text_changed: 'Baseball glove'" in out
        assert "SearchActions.search_pending: None" in out
        assert "SearchActions.search_succeeded" in out
        assert "1 result(s)" in out
        assert "  - Baseball glove" in out

    def test_no_results(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["search", "zzz", "--backend", "simulated"])
        assert exc_info.value.code == 0
        assert "0 result(s)" in capsys.readouterr().out


class TestCLIRoutes:
    def test_lists_catalog_routes(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes"])
        out = capsys.readouterr().out
        assert "READ   /products/search/{searchText}" in out
        assert "WRITE  /products" in out
