"""
Tests for the command-line entry point and interactive console.
"""

import io
import sys
import types

from backend.finitelogic.cli import WELCOME, enable_history, main, run_lines, run_repl
from backend.finitelogic.config import EngineConfig
from backend.finitelogic.session import Session


def feed_input(monkeypatch, lines):
    """Make input() return the given lines, then raise EOFError."""
    pending = iter(lines)
    prompts = []

    def fake_input(prompt=""):
        prompts.append(prompt)
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)
    return prompts


class TestRunLines:
    """Tests for run_lines()."""

    def test_skips_comments(self):
        out = io.StringIO()
        failures = run_lines(Session(), ["# comment", "", "domain add a", "state"], out)
        assert failures == 0
        assert "Object 'a' added to the domain." in out.getvalue()
        assert "Domain State:" in out.getvalue()

    def test_counts_failures(self):
        out = io.StringIO()
        assert run_lines(Session(), ["query nobody a", "bogus"], out) == 2

    def test_stops_at_exit(self):
        out = io.StringIO()
        run_lines(Session(), ["exit", "domain add a"], out)
        assert "added" not in out.getvalue()


class TestEnableHistory:
    """Tests for readline-backed line editing."""

    def test_available(self, monkeypatch):
        """Test history is reported on when readline imports."""
        monkeypatch.setitem(sys.modules, "readline", types.ModuleType("readline"))
        assert enable_history() is True

    def test_unavailable(self, monkeypatch):
        """Test a platform without readline still runs the console."""
        monkeypatch.setitem(sys.modules, "readline", None)
        assert enable_history() is False


class TestRunRepl:
    """Tests for the interactive loop."""

    def test_banner_and_commands_until_exit(self, monkeypatch):
        monkeypatch.setitem(sys.modules, "readline", None)
        prompts = feed_input(monkeypatch, ["domain add a", "exit", "domain add b"])
        out = io.StringIO()
        session = Session()

        run_repl(session, EngineConfig(), out)

        text = out.getvalue()
        assert text.startswith(WELCOME[0])
        assert "Object 'a' added to the domain." in text
        assert "b" not in session.domain
        assert prompts == ["logic> ", "logic> "]

    def test_end_of_input_stops(self, monkeypatch):
        """Test EOF ends the loop without a banner when disabled."""
        feed_input(monkeypatch, [])
        out = io.StringIO()
        run_repl(Session(), EngineConfig(show_banner=False), out)
        assert out.getvalue() == "\n"

    def test_malformed_line_keeps_running(self, monkeypatch):
        """Test an unbalanced quote is reported and the next command runs."""
        feed_input(monkeypatch, ['fact x "oops', "domain add x"])
        out = io.StringIO()
        session = Session()
        run_repl(session, EngineConfig(show_banner=False), out)
        assert "Error: " in out.getvalue()
        assert "x" in session.domain


class TestMain:
    """Tests for main()."""

    def test_execute_option(self, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        code = main(["-e", "domain add socrates", "-e", "check forall mortal?"])
        assert code == 0
        assert "Result for ALL objects: FALSE" in capsys.readouterr().out

    def test_script_option(self, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        script = tmp_path / "session.txt"
        script.write_text("domain add x\nquery x a RELEVANTLY_IMPLIES a?\n", encoding="utf-8")
        assert main(["--script", str(script)]) == 0
        assert "Final Result: FALSE" in capsys.readouterr().out

    def test_missing_script(self, capsys, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(["--script", str(tmp_path / "absent.txt")]) == 2
        assert "cannot read" in capsys.readouterr().err

    def test_failed_command_sets_exit_code(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert main(["-e", "query nobody a"]) == 1

    def test_bad_config_exit_code(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("log_level: chatty\n", encoding="utf-8")
        assert main(["--config", str(path), "-e", "state"]) == 2
