"""Fault tree events: house, basic and CCF events, and gates.

Events are shared objects: the same ``Gate`` or ``BasicEvent`` may be an
argument of many formulas. Identity for argument uniqueness is the
case-normalized ``id``; ``name`` keeps the original capitalization.
"""

from __future__ import annotations

import weakref
from typing import TYPE_CHECKING, Any, Iterable, Optional, Tuple

from faulttree.errors import (
    IllegalOperation,
    InvalidArgument,
    LogicError,
    ValidationError,
)
from faulttree.logging import get_logger
from faulttree.model.element import Element, Role, make_id
from faulttree.model.expression import Expression

if TYPE_CHECKING:
    from faulttree.model.formula import Formula

LOGGER = get_logger(__name__)


class Event(Element, Role):
    """Abstract base class for fault tree events.

    Names are assumed to have no leading or trailing whitespace.

    Args:
        name: Identifying name with capitalization preserved.
        base_path: Series of containers holding this event.
        is_public: Whether the event is public.

    Attributes:
        orphan (bool): True if no formula refers to this event. Maintained by
            the pass that populates the model.
    """

    def __init__(self, name: str, base_path: str = "", is_public: bool = True) -> None:
        if type(self) in _ABSTRACT_EVENTS:
            raise IllegalOperation(
                f"{type(self).__name__} is abstract; instantiate a concrete event type."
            )
        Element.__init__(self, name)
        Role.__init__(self, base_path, is_public)
        self._id = make_id(name, base_path, is_public)
        self.orphan = False

    @property
    def id(self) -> str:
        """Case-normalized identifier set upon construction."""
        return self._id

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class PrimaryEvent(Event):
    """Abstract base class for leaf events that can cause failures."""

    def __init__(self, name: str, base_path: str = "", is_public: bool = True) -> None:
        super().__init__(name, base_path, is_public)
        self._has_expression = False

    @property
    def has_expression(self) -> bool:
        """True once a probability or state definition is attached."""
        return self._has_expression


class HouseEvent(PrimaryEvent):
    """Leaf event fixed to a Boolean constant."""

    def __init__(self, name: str, base_path: str = "", is_public: bool = True) -> None:
        super().__init__(name, base_path, is_public)
        self._state = False

    @property
    def state(self) -> bool:
        """On (True) or Off (False) state of this house event."""
        return self._state

    @state.setter
    def state(self, constant: bool) -> None:
        self._has_expression = True
        self._state = bool(constant)


class BasicEvent(PrimaryEvent):
    """Leaf failure event with a probability expression."""

    def __init__(self, name: str, base_path: str = "", is_public: bool = True) -> None:
        super().__init__(name, base_path, is_public)
        self._expression: Optional[Expression] = None
        self._ccf_gate: Optional[Gate] = None

    @property
    def expression(self) -> Optional[Expression]:
        """Expression that provides probability values, or None if unset."""
        return self._expression

    @expression.setter
    def expression(self, expression: Expression) -> None:
        if self._expression is not None:
            raise LogicError(f"Expression of basic event '{self.name}' is already set.")
        if not isinstance(expression, Expression):
            raise InvalidArgument(
                f"Basic event '{self.name}' expects an Expression, got {expression!r}."
            )
        self._has_expression = True
        self._expression = expression

    def _require_expression(self) -> Expression:
        if self._expression is None:
            raise LogicError(f"Basic event '{self.name}' has no expression.")
        return self._expression

    def p(self) -> float:
        """Return the mean probability of this basic event.

        Raises:
            LogicError: If the expression is not set.
        """
        return self._require_expression().mean()

    def sample_probability(self) -> float:
        """Sample the probability value from the expression's distribution."""
        return self._require_expression().sample()

    def reset(self) -> None:
        """Reset the sampling."""
        self._require_expression().reset()

    def is_constant(self) -> bool:
        """Return True if the probability has no uncertainty."""
        return self._require_expression().is_constant()

    def validate(self) -> None:
        """Check that the expression yields probabilities in [0, 1].

        Raises:
            ValidationError: The expression can leave the [0, 1] range.
            LogicError: The expression is not set.
        """
        expression = self._require_expression()
        low, high = expression.min(), expression.max()
        if low < 0 or high > 1:
            raise ValidationError(
                f"Expression of basic event '{self.name}' is invalid: "
                f"values [{low}, {high}] fall outside the probability range [0, 1]."
            )

    def has_ccf(self) -> bool:
        """Return True if this basic event belongs to a CCF group."""
        return self._ccf_gate is not None

    @property
    def ccf_gate(self) -> Gate:
        """CCF group gate that replaces this event in common cause analysis.

        Raises:
            LogicError: If the event is not in a CCF group.
        """
        if self._ccf_gate is None:
            raise LogicError(f"Basic event '{self.name}' has no CCF gate.")
        return self._ccf_gate

    @ccf_gate.setter
    def ccf_gate(self, gate: Gate) -> None:
        if self._ccf_gate is not None:
            raise LogicError(f"CCF gate of basic event '{self.name}' is already set.")
        self._ccf_gate = gate


class CcfEvent(BasicEvent):
    """Basic event standing for the multiple failure of a CCF group's members.

    The event is generated by a CCF group, which formats its name. The group
    and the names of the members are kept for reporting only.

    Args:
        name: Identifying name of this CCF event.
        ccf_group: The group that created this event. Only a weak reference
            is kept.
        member_names: Names of the member events failing together.
    """

    def __init__(self, name: str, ccf_group: Any, member_names: Iterable[str]) -> None:
        super().__init__(name)
        try:
            self._ccf_group = weakref.ref(ccf_group)
        except TypeError:
            raise InvalidArgument(
                f"CCF event '{name}' requires its CCF group, got {ccf_group!r}."
            ) from None
        self._member_names: Tuple[str, ...] = tuple(member_names)

    @property
    def ccf_group(self) -> Any:
        """The CCF group that created this event, or None if it is gone."""
        return self._ccf_group()

    @property
    def member_names(self) -> Tuple[str, ...]:
        return self._member_names


class Gate(Event):
    """Fault tree node applying a Boolean formula to its arguments.

    Attributes:
        mark (str): Scratch state for graph traversals; empty for no mark.
            Not synchronized: a pass using it must own the whole graph.
    """

    def __init__(self, name: str, base_path: str = "", is_public: bool = True) -> None:
        super().__init__(name, base_path, is_public)
        self._formula: Optional[Formula] = None
        self.mark = ""

    @property
    def formula(self) -> Optional[Formula]:
        """Boolean formula of this gate, or None if not yet set."""
        return self._formula

    @formula.setter
    def formula(self, formula: Formula) -> None:
        if self._formula is not None:
            raise LogicError(f"Formula of gate '{self.name}' is already set.")
        from faulttree.model.formula import Formula

        if not isinstance(formula, Formula):
            raise InvalidArgument(f"Gate '{self.name}' expects a Formula, got {formula!r}.")
        formula._claim(self)
        self._formula = formula
        LOGGER.debug("Gate '%s' gets %s formula", self.name, formula.type.name)

    def connector(self) -> Optional[Formula]:
        """Return the formula linking this gate to its argument gates."""
        return self._formula

    def validate(self) -> None:
        """Check the formula tree owned by this gate.

        Raises:
            ValidationError: Errors in the gate's logic.
            LogicError: The formula is not set.
        """
        if self._formula is None:
            raise LogicError(f"Gate '{self.name}' has no formula.")
        pending = [self._formula]
        while pending:
            formula = pending.pop()
            try:
                formula.validate()
            except ValidationError as err:
                err.msg = f"Gate '{self.name}': {err.msg}"
                raise
            pending.extend(formula.formula_args)


_ABSTRACT_EVENTS = (Event, PrimaryEvent)
