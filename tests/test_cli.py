"""Tests for the terminal front-end."""
from typer.testing import CliRunner

import cli

runner = CliRunner()


def test_empty_line_quits_without_sending():
    result = runner.invoke(cli.app, ["chat", "--url", "http://relay.invalid"], input="\n")

    assert result.exit_code == 0
    assert "Halo!" in result.output
    assert "0 turns exchanged" in result.output


def test_terminal_view_prints_raw_reply(capsys):
    cli.TerminalView().show_reply("**Halo**", "<p><strong>Halo</strong></p>")

    out = capsys.readouterr().out
    assert "**Halo**" in out
    assert "<strong>" not in out
