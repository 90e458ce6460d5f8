"""
System-wide Pydantic models for shell command results.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, NonNegativeInt


# --- Error Types ---

ShellFailureReason = Literal[
    'depth_exceeded',
    'command_failure', # A dispatched command raised
    'unexpected_error'
]
"""
Reasons a shell invocation can fail
"""

class ShellFailureDetails(BaseModel):
    """Detailed information for shell failures."""
    failing_command: Optional[str] = None
    position: Optional[NonNegativeInt] = None
    max_depth: Optional[int] = None
    exception_type: Optional[str] = None
    notes: Optional[Dict[str, Any]] = None

class ShellFailure(BaseModel):
    """Error describing why a shell invocation failed."""
    type: Literal['SHELL_FAILURE'] = 'SHELL_FAILURE'
    reason: ShellFailureReason
    message: str
    details: Optional[ShellFailureDetails] = None

# --- Execution Types ---

ReturnStatus = Literal["COMPLETE", "FAILED"]
"""
Shell execution status
"""

class ShellResult(BaseModel):
    """
    Result of handling one line of user input.
    """
    content: str # Joined replies, or the error message when FAILED
    status: ReturnStatus
    replies: List[str] = Field(default_factory=list)
    notes: Dict[str, Any] = Field(default_factory=dict) # Ensure notes is always a dict

    @property
    def is_error(self) -> bool:
        return self.status == "FAILED"
