"""
System-wide custom error types.
"""
from typing import Optional


class ShellSyntaxError(ValueError):
    """
    Custom exception raised when a command string cannot be parsed.
    Inherits from ValueError for general compatibility but provides specific context.
    """
    def __init__(
        self,
        message: str,
        command_text: str,
        error_details: str = "",
        position: Optional[int] = None,
    ):
        """
        Initializes the ShellSyntaxError.

        Args:
            message: A high-level error message.
            command_text: The original command string that caused the error.
            error_details: Specific details from the parser, if available.
            position: Character offset in command_text where the problem was found.
        """
        full_message = f"{message}\nInput: '{command_text}'"
        if position is not None:
            full_message += f"\nPosition: {position}"
        if error_details:
            full_message += f"\nDetails: {error_details}"
        super().__init__(full_message)
        self.message = message
        self.command_text = command_text
        self.error_details = error_details
        self.position = position


class ShellDepthError(ShellSyntaxError):
    """
    Raised when interpolations (or nested shell invocations) are nested
    deeper than the configured limit.
    """
    def __init__(
        self,
        command_text: str,
        max_depth: Optional[int],
        error_details: str = "",
        position: Optional[int] = None,
    ):
        if max_depth is None:
            message = "Interpolation nesting exceeds the interpreter's recursion limit."
        else:
            message = f"Interpolation nesting exceeds maximum depth of {max_depth}."
        super().__init__(message, command_text, error_details=error_details, position=position)
        self.max_depth = max_depth


class ShellEvaluationError(Exception):
    """
    Raised during evaluation when the evaluator's own contract is violated,
    e.g. a run callback returning something other than a string.
    Failures raised *by* the callback are never wrapped in this type.
    """
    def __init__(self, message: str, command_text: str = "", error_details: str = ""):
        """
        Initializes the ShellEvaluationError.

        Args:
            message: A high-level error message describing the evaluation failure.
            command_text: The command text being resolved when the error occurred.
            error_details: Specific details about the error.
        """
        full_message = f"{message}"
        if command_text:
            full_message += f"\nCommand: '{command_text}'"
        if error_details:
            full_message += f"\nDetails: {error_details}"
        super().__init__(full_message)
        self.command_text = command_text
        self.error_details = error_details


class CommandRegistrationError(ValueError):
    """Raised when a command name is registered twice or is otherwise invalid."""
