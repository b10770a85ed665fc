"""Exception hierarchy for fault tree models.

Two disjoint families are defined here:

- ``ValidationError`` and its subclasses signal malformed user input
  (duplicate arguments, bad arity, undefined references, cycles). Callers that
  build models are expected to catch and report them.
- ``LogicError`` and the other general errors signal misuse of the API by its
  own callers (e.g., setting a formula twice). They indicate a bug in the
  calling code and are not meant to be recovered from.
"""

from __future__ import annotations

from typing import List, Optional


class Error(Exception):
    """Base class for all errors raised by faulttree.

    Attributes:
        what: Optional identifier of the error kind. It is not the message
            printed for users.
    """

    PREFIX = "faulttree error: "

    def __init__(self, msg: str, what: Optional[str] = None) -> None:
        super().__init__(msg)
        self._msg = msg
        self.what = what

    @property
    def msg(self) -> str:
        """Core message describing the error."""
        return self._msg

    @msg.setter
    def msg(self, msg: str) -> None:
        self._msg = msg
        self.args = (msg,)

    def __str__(self) -> str:
        return self.PREFIX + self._msg


class IOError(Error):  # noqa: A001
    """Input/output related errors."""


class InvalidArgument(Error):
    """Unacceptable argument passed to a function."""


class LogicError(Error):
    """Internal logic error, e.g. precondition failure or API misuse."""


class IllegalOperation(Error):
    """The requested operation is not legal for this object."""


class SettingsError(Error):
    """Error in analysis or validation settings."""


class ValidationError(Error):
    """Invalid model input supplied by the user."""


class RedefinitionError(ValidationError):
    """An element is defined more than once."""


class DuplicateArgumentError(ValidationError):
    """A formula argument is repeated."""


class UndefinedElement(ValidationError):
    """A reference does not resolve to any element of the model."""


class CycleError(ValidationError):
    """A structural cycle was detected.

    Attributes:
        cycle: Names along the cycle; the first name is repeated at the end.
    """

    def __init__(
        self, msg: str, cycle: Optional[List[str]] = None, what: Optional[str] = None
    ) -> None:
        super().__init__(msg, what=what)
        self.cycle: List[str] = list(cycle) if cycle else []
