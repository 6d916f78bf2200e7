"""Tests for CalSettings — CLI flags as the only source."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from ptcal.config.settings import CalSettings


class TestCalSettings:
    def test_defaults(self) -> None:
        s = CalSettings.from_cli()
        assert s.json_output is False
        assert s.verbose is False
        assert s.log_json is False
        assert s.highlight_today is False

    def test_cli_flags(self) -> None:
        s = CalSettings.from_cli(json_output=True, verbose=True)
        assert s.json_output is True
        assert s.verbose is True

    @pytest.mark.parametrize(
        "name",
        ["PTCAL_JSON_OUTPUT", "PTCAL_VERBOSE", "JSON_OUTPUT", "VERBOSE", "HIGHLIGHT_TODAY"],
    )
    def test_environment_is_ignored(self, monkeypatch: pytest.MonkeyPatch, name: str) -> None:
        monkeypatch.setenv(name, "1")
        s = CalSettings.from_cli()
        assert s.json_output is False
        assert s.verbose is False
        assert s.highlight_today is False

    def test_frozen(self) -> None:
        s = CalSettings.from_cli()
        with pytest.raises(ValidationError):
            s.verbose = True  # type: ignore[misc]
