# Copyright (c) 2026 Contrastkit
# SPDX-License-Identifier: MIT

"""Tests for the command-line entry point."""

import json

import pytest

from contrastkit.__main__ import EXIT_FAIL, EXIT_OK, EXIT_USAGE, main


class TestCheckCommand:

    def test_text_report(self, capsys):
        assert main(["check", "#333333", "#FFFFFF"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "**Ratio:** 12.63:1" in out

    def test_json(self, capsys):
        assert main(["check", "rgb(119, 119, 119)", "#FFFFFF", "--json"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["ratio"] == 4.48
        assert data["textColor"] == "#777777"
        assert data["largeTextOnly"] is True

    def test_suggest(self, capsys):
        assert main(["check", "#777777", "#FFFFFF", "-j", "-s"]) == EXIT_OK
        data = json.loads(capsys.readouterr().out)
        assert data["suggestions"]["text"][0]["suggestedColor"] == "#5E5E5E"
        assert data["suggestions"]["background"] == []

    def test_invalid_color(self, capsys):
        assert main(["check", "banana", "#FFFFFF"]) == EXIT_USAGE
        assert "Invalid color format" in capsys.readouterr().err

    @pytest.mark.parametrize("level,expected", [
        ("AA-large", EXIT_OK),
        ("AA", EXIT_FAIL),
        ("AAA", EXIT_FAIL),
    ])
    def test_fail_below(self, capsys, level, expected):
        assert main(["check", "#777777", "#FFFFFF", "--fail-below", level]) == expected
        captured = capsys.readouterr()
        assert "**Ratio:** 4.48:1" in captured.out
        if expected == EXIT_FAIL:
            assert f"does not meet {level}" in captured.err


    def test_gate_agrees_with_report(self, capsys):
        assert main(["check", "#959595", "#FFFFFF", "--fail-below", "AA-large"]) == EXIT_FAIL
        captured = capsys.readouterr()
        assert "**Ratio:** 3.00:1" in captured.out
        assert "- Large Text (AA): fail (needs 3:1)" in captured.out
        assert "does not meet AA-large" in captured.err


class TestValidateCommand:

    def test_valid(self, capsys):
        assert main(["validate", "hsl(210, 50%, 40%)"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "valid hsl: hsl(210, 50%, 40%)"

    def test_corrected(self, capsys):
        assert main(["validate", "fff"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == (
            "valid hex: #FFFFFF (Auto-corrected hex format)"
        )

    def test_invalid(self, capsys):
        assert main(["validate", "nope"]) == EXIT_FAIL
        assert capsys.readouterr().out.startswith("invalid: Invalid color format")


class TestConvertCommand:

    def test_default_hex(self, capsys):
        assert main(["convert", "rgb(51, 51, 51)"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "#333333"

    def test_to_rgb(self, capsys):
        assert main(["convert", "#336699", "--to", "rgb"]) == EXIT_OK
        assert capsys.readouterr().out.strip() == "rgb(51, 102, 153)"

    def test_unparseable(self, capsys):
        assert main(["convert", "oklch(50% 0.1 200)"]) == EXIT_FAIL
        assert "cannot convert" in capsys.readouterr().err


class TestUsage:

    def test_no_command(self, capsys):
        assert main([]) == EXIT_USAGE
        assert "usage:" in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert "contrastkit 1.0.0" in capsys.readouterr().out
