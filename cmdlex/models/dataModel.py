"""
dataModel.py

This module defines the data models and schemas used throughout the CMDLEX application.
The models leverage Pydantic for validation and type safety.

Features:
- Enum for the alias prefix predicate policy.
- Input collection and processing results for the REPL and one-shot modes.
- Input mode detection result.

Usage:
Import these models to validate and structure data used in the application.
"""

from pydantic import BaseModel, Field
from enum import Enum


class PrefixPolicy(Enum):
    """How an alias is judged to already carry an accepted prefix.

    Attributes:
        ALL: Alias must start with every configured prefix (compatible).
        ANY: Alias must start with at least one configured prefix.

    Example:
        With prefixes ("-", "--", "/") the alias "--verbose" is prefixed
        under ANY but not under ALL, so ALL still adds "---verbose",
        "----verbose" and "/--verbose".
    """

    ALL = "all"
    ANY = "any"


class InputResult(BaseModel):
    """Result of input collection operation.

    Attributes:
        text: The collected input text
        continue_loop: Whether to continue processing
        error: Optional error message if input collection failed
    """

    text: str
    continue_loop: bool
    error: str | None = None


class ProcessResult(BaseModel):
    """Result of command/input processing.

    Attributes:
        text: Input text as processed (escape prefix removed)
        tokens: Tokens split from the text, empty for commands
        is_command: Whether input was a command
        should_exit: Whether to exit processing
        error: Optional error message
        success: Whether processing succeeded
        exit_code: Exit code for non-interactive mode
    """

    text: str
    tokens: list[str] = Field(default_factory=list)
    is_command: bool
    should_exit: bool
    error: str | None = None
    success: bool = True
    exit_code: int = 0


class InputMode(BaseModel):
    """Input mode determination.

    Attributes:
        has_stdin: Whether stdin has content
        split_string: Command line passed directly with --split
        use_repl: Whether to use interactive REPL
    """

    has_stdin: bool = False
    split_string: str | None = None
    use_repl: bool = True
