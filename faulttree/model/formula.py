"""Boolean formulas of fault tree gates.

A formula holds an operator and its arguments: shared events (house events,
basic events, gates) and nested formulas owned exclusively by the formula.
Formulas never look for cycles themselves. They expose ``nodes()`` and
``connectors()`` for external graph passes instead.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, List, Optional, Tuple, Union

from faulttree.errors import (
    DuplicateArgumentError,
    InvalidArgument,
    LogicError,
    ValidationError,
)
from faulttree.logging import get_logger
from faulttree.model.event import BasicEvent, Event, Gate, HouseEvent

LOGGER = get_logger(__name__)


class Operator(IntEnum):
    """Logical operators of formulas."""

    AND = 1
    OR = 2
    ATLEAST = 3  # k-out-of-n with the vote number as k
    XOR = 4
    NOT = 5
    NAND = 6
    NOR = 7
    NULL = 8  # Pass-through of a single argument

    @classmethod
    def from_string(cls, value: str) -> "Operator":
        """Parse a case-insensitive operator name.

        Raises:
            InvalidArgument: If the name is not a known operator.
        """
        try:
            return cls[value.strip().upper()]
        except KeyError:
            valid = ", ".join(e.name.lower() for e in cls)
            raise InvalidArgument(
                f"Invalid formula operator '{value}'. Valid operators are: {valid}"
            ) from None


#: Operators that require two or more arguments.
TWO_OR_MORE = frozenset({Operator.AND, Operator.OR, Operator.NAND, Operator.NOR})

#: Operators that require exactly one argument.
SINGLE = frozenset({Operator.NOT, Operator.NULL})

EventArgument = Union[HouseEvent, BasicEvent, Gate]


class Formula:
    """Boolean formula with an operator and arguments.

    Formulas are not shared: a nested formula belongs to one parent formula,
    a top formula to one gate.

    Args:
        type: Logical operator, as an ``Operator`` or its case-insensitive name.
    """

    def __init__(self, type: Union[Operator, str]) -> None:  # noqa: A002
        if isinstance(type, str):
            type = Operator.from_string(type)
        elif not isinstance(type, Operator):
            raise InvalidArgument(f"Invalid formula operator {type!r}.")
        self._type = type
        self._vote_number: Optional[int] = None
        self._event_args: Dict[str, Event] = {}
        self._house_event_args: List[HouseEvent] = []
        self._basic_event_args: List[BasicEvent] = []
        self._gate_args: List[Gate] = []
        self._formula_args: List[Formula] = []
        self._owner: Optional[Union[Formula, Gate]] = None
        self._nodes: Tuple[Gate, ...] = ()
        self._connectors: Tuple[Formula, ...] = ()
        self._gather = True

    @property
    def type(self) -> Operator:
        return self._type

    @property
    def vote_number(self) -> int:
        """Vote number of an ATLEAST formula.

        Raises:
            LogicError: The operator is not ATLEAST or the number is not set.
        """
        if self._type is not Operator.ATLEAST:
            raise LogicError(
                f"Only ATLEAST formulas have a vote number; this formula is {self._type.name}."
            )
        if self._vote_number is None:
            raise LogicError("Vote number is not set.")
        return self._vote_number

    @vote_number.setter
    def vote_number(self, number: int) -> None:
        """Set the vote number of an ATLEAST formula.

        The number of arguments can still grow after this call, so the vote
        number is checked against it only in ``validate()``.

        Raises:
            LogicError: The operator is not ATLEAST.
            InvalidArgument: The number is not a positive integer.
        """
        if self._type is not Operator.ATLEAST:
            raise LogicError(
                "Vote number can only be defined for ATLEAST formulas. "
                f"The operator of this formula is {self._type.name}."
            )
        if isinstance(number, bool) or not isinstance(number, int):
            raise InvalidArgument(f"Vote number must be an integer, got {number!r}.")
        if number < 1:
            raise InvalidArgument(f"Vote number must be positive, got {number}.")
        self._vote_number = number

    @property
    def event_args(self) -> Dict[str, Event]:
        """All event arguments keyed by id."""
        return self._event_args

    @property
    def house_event_args(self) -> List[HouseEvent]:
        return self._house_event_args

    @property
    def basic_event_args(self) -> List[BasicEvent]:
        return self._basic_event_args

    @property
    def gate_args(self) -> List[Gate]:
        return self._gate_args

    @property
    def formula_args(self) -> List[Formula]:
        return self._formula_args

    @property
    def owner(self) -> Optional[Union[Formula, Gate]]:
        """The gate or parent formula owning this formula."""
        return self._owner

    def num_args(self) -> int:
        """Return the number of event and formula arguments."""
        return len(self._event_args) + len(self._formula_args)

    def add_argument(self, arg: Union[EventArgument, Formula]) -> None:
        """Add an event or a nested formula to the arguments.

        Events are shared and must be unique by id across all event kinds.
        Nested formulas are taken into exclusive ownership.

        Args:
            arg: House event, basic event (CCF events included), gate or formula.

        Raises:
            DuplicateArgumentError: An event with the same id is an argument.
            LogicError: The nested formula already has an owner.
            InvalidArgument: The argument is not an event or formula.
        """
        if isinstance(arg, Formula):
            self._add_formula(arg)
        elif isinstance(arg, HouseEvent):
            self._add_event(arg, self._house_event_args)
        elif isinstance(arg, BasicEvent):
            self._add_event(arg, self._basic_event_args)
        elif isinstance(arg, Gate):
            self._add_event(arg, self._gate_args)
        else:
            raise InvalidArgument(f"Unsupported formula argument {arg!r}.")
        self._gather = True

    def _add_event(self, event: Event, container: List) -> None:
        if event.id in self._event_args:
            raise DuplicateArgumentError(f"Duplicate argument {event.name}")
        self._event_args[event.id] = event
        container.append(event)
        LOGGER.debug("Added %s to %s formula", event, self._type.name)

    def _add_formula(self, formula: Formula) -> None:
        ancestor: Optional[Union[Formula, Gate]] = self
        while isinstance(ancestor, Formula):
            if ancestor is formula:
                raise LogicError("A formula cannot be nested in itself.")
            ancestor = ancestor._owner
        formula._claim(self)
        self._formula_args.append(formula)

    def _claim(self, owner: Union[Formula, Gate]) -> None:
        """Record the single owner of this formula."""
        if self._owner is not None:
            raise LogicError(
                f"The {self._type.name} formula already belongs to {self._owner!r}."
            )
        self._owner = owner

    def validate(self) -> None:
        """Check the number of arguments against the operator.

        Only this formula is checked; nested formulas and gates are not.

        Raises:
            ValidationError: The arguments do not suit the operator.
        """
        form = self._type
        size = self.num_args()
        if form in TWO_OR_MORE:
            if size < 2:
                raise ValidationError(
                    f"{form.name} formula expects 2 or more arguments, got {size}."
                )
        elif form in SINGLE:
            if size != 1:
                raise ValidationError(
                    f"{form.name} formula expects exactly 1 argument, got {size}."
                )
        elif form is Operator.XOR:
            if size != 2:
                raise ValidationError(
                    f"XOR formula expects exactly 2 arguments, got {size}."
                )
        elif form is Operator.ATLEAST:
            if self._vote_number is None:
                raise ValidationError("ATLEAST formula requires a vote number.")
            if not 1 < self._vote_number < size:
                raise ValidationError(
                    f"ATLEAST formula vote number {self._vote_number} must be "
                    f"greater than 1 and less than the number of arguments ({size})."
                )

    def nodes(self) -> Tuple[Gate, ...]:
        """Return the gate arguments as graph nodes."""
        if self._gather:
            self._gather_nodes_and_connectors()
        return self._nodes

    def connectors(self) -> Tuple[Formula, ...]:
        """Return the nested formulas as graph connectors."""
        if self._gather:
            self._gather_nodes_and_connectors()
        return self._connectors

    def _gather_nodes_and_connectors(self) -> None:
        self._nodes = tuple(self._gate_args)
        self._connectors = tuple(self._formula_args)
        self._gather = False

    def __repr__(self) -> str:
        return f"Formula({self._type.name}, num_args={self.num_args()})"
