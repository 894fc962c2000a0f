"""Custom exceptions for the extraction context."""

from typing import Optional


class NoGradeToken(ValueError):
    """
    Raised when the text at a cursor does not start with a grade-shaped token.

    This is a local, recoverable failure: the chain resolver and the scanner
    catch it and backtrack. It never escapes extract_grade().

    Attributes:
        message: Error description
        text: The text being scanned
        pos: Cursor at which parsing gave up
    """

    def __init__(self, message: str, text: Optional[str] = None, pos: Optional[int] = None):
        self.message = message
        self.text = text
        self.pos = pos

        if text is not None and pos is not None:
            context = text[pos : pos + 20]
            message = f"{message} at position {pos}: {context!r}"

        super().__init__(message)
