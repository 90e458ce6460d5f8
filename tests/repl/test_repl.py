"""Tests for the REPL Interface."""
import io

import pytest
from unittest.mock import patch, MagicMock

from cmdshell.dispatcher import ShellDispatcher
from cmdshell.repl.repl import Repl
from cmdshell.system.models import ShellResult


@pytest.fixture
def output():
    return io.StringIO()

@pytest.fixture
def repl_instance(dispatcher, output):
    """Fixture for REPL instance over the real dispatcher."""
    return Repl(dispatcher, output_stream=output)

@pytest.fixture
def mock_dispatcher():
    mock = MagicMock(spec=ShellDispatcher)
    mock.handle.return_value = ShellResult(status="COMPLETE", content="ok", notes={"command": "x", "known_command": True})
    return mock

class TestRepl:
    """Tests for the REPL class."""

    def test_init(self, dispatcher):
        """Test REPL initialization."""
        repl = Repl(dispatcher)
        
        assert repl.dispatcher is dispatcher
        assert repl.verbose is False
        assert "/help" in repl.commands
        assert "/exit" in repl.commands
        assert "/verbose" in repl.commands

    def test_process_input_command(self, repl_instance):
        """Lines starting with '/' are REPL commands."""
        with patch.object(repl_instance, '_handle_command') as mock_handle_command:
            repl_instance._process_input("/help")
            mock_handle_command.assert_called_once_with("/help")

    def test_process_input_line(self, repl_instance):
        """Other lines go to the dispatcher."""
        with patch.object(repl_instance, '_handle_line') as mock_handle_line:
            repl_instance._process_input("  shell echo $(ping)  ")
            mock_handle_line.assert_called_once_with("shell echo $(ping)")

    def test_process_input_blank(self, repl_instance):
        with patch.object(repl_instance, '_handle_line') as mock_handle_line:
            repl_instance._process_input("   ")
            mock_handle_line.assert_not_called()

    def test_handle_line_prints_result(self, repl_instance, output):
        repl_instance._process_input("shell upper $(ping)")
        assert output.getvalue() == "PONG\n"

    def test_handle_line_malformed(self, repl_instance, output):
        repl_instance._process_input("shell echo $(ping")
        assert output.getvalue() == "Malformed command echo $(ping\n"

    def test_handle_line_error(self, mock_dispatcher, output):
        mock_dispatcher.handle.return_value = ShellResult(status="FAILED", content="Command failed: boom")
        Repl(mock_dispatcher, output_stream=output)._process_input("shell $(fail)")
        assert output.getvalue() == "Error: Command failed: boom\n"

    def test_handle_line_unknown_command(self, repl_instance, output):
        repl_instance._process_input("nosuch thing")
        assert "Unknown command: nosuch" in output.getvalue()

    def test_handle_line_known_command_without_output(self, repl_instance, output, say_output):
        repl_instance._process_input("say #c hi")
        assert output.getvalue() == ""
        assert say_output.getvalue() == "[#c] hi\n"

    def test_verbose_prints_notes(self, mock_dispatcher, output):
        repl = Repl(mock_dispatcher, output_stream=output)
        repl.verbose = True
        repl._process_input("x")
        assert "ok\n" in output.getvalue()
        assert '"known_command": true' in output.getvalue()

    def test_unknown_repl_command(self, repl_instance, output):
        repl_instance._process_input("/bogus")
        assert "Unknown command: /bogus" in output.getvalue()

    def test_cmd_help(self, repl_instance, output):
        repl_instance._cmd_help("")
        text = output.getvalue()
        assert "/verbose [on|off]" in text
        assert "  shell - " in text
        assert "  ping - ping: replies pong" in text

    @pytest.mark.parametrize("args, expected", [("", True), ("on", True), ("off", False), ("yes", True), ("0", False)])
    def test_cmd_verbose(self, repl_instance, args, expected):
        repl_instance._cmd_verbose(args)
        assert repl_instance.verbose is expected

    def test_cmd_verbose_invalid(self, repl_instance, output):
        repl_instance._cmd_verbose("maybe")
        assert repl_instance.verbose is False
        assert "Usage: /verbose [on|off]" in output.getvalue()

    def test_cmd_exit(self, repl_instance):
        with pytest.raises(SystemExit) as excinfo:
            repl_instance._cmd_exit("")
        assert excinfo.value.code == 0

    def test_start_until_eof(self, repl_instance, output):
        with patch("builtins.input", side_effect=["shell echo $(ping)", EOFError]):
            repl_instance.start()
        text = output.getvalue()
        assert "pong\n" in text
        assert text.endswith("Exiting...\n")
