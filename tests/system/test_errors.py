from cmdshell.system.errors import (
    CommandRegistrationError, ShellDepthError, ShellEvaluationError, ShellSyntaxError,
)


def test_syntax_error_message():
    error = ShellSyntaxError("Unmatched '$('.", "$(x", error_details="no close", position=0)
    assert str(error) == "Unmatched '$('.\nInput: '$(x'\nPosition: 0\nDetails: no close"
    assert error.message == "Unmatched '$('."
    assert error.command_text == "$(x"
    assert isinstance(error, ValueError)

def test_syntax_error_minimal_message():
    assert str(ShellSyntaxError("Bad.", "x")) == "Bad.\nInput: 'x'"

def test_depth_error():
    error = ShellDepthError("$($(x))", 1, position=2)
    assert isinstance(error, ShellSyntaxError)
    assert error.max_depth == 1
    assert error.message == "Interpolation nesting exceeds maximum depth of 1."

def test_depth_error_without_limit():
    assert "recursion limit" in ShellDepthError("x", None).message

def test_evaluation_error_message():
    error = ShellEvaluationError("Run callback must return a string.", command_text="b", error_details="Got int: 1")
    assert str(error) == "Run callback must return a string.\nCommand: 'b'\nDetails: Got int: 1"

def test_registration_error_is_value_error():
    assert issubclass(CommandRegistrationError, ValueError)
