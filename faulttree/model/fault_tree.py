"""Registry of the events of a fault tree model.

``FaultTree`` owns the events of a model by id. Formulas refer to the same
objects, so an event lives as long as the registry or any formula holds it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set

from faulttree.config import VALIDATION_CONFIG, ValidationConfig
from faulttree.errors import (
    InvalidArgument,
    RedefinitionError,
    UndefinedElement,
    ValidationError,
)
from faulttree.graph.cycle import check_cycles
from faulttree.logging import get_logger
from faulttree.model.event import BasicEvent, Event, Gate, HouseEvent
from faulttree.model.formula import Formula

LOGGER = get_logger(__name__)


def _iter_formulas(formula: Formula) -> Iterator[Formula]:
    """Yield the formula and all formulas nested in it."""
    pending = [formula]
    while pending:
        current = pending.pop()
        yield current
        pending.extend(current.connectors())


@dataclass
class FaultTree:
    """A container of gates, basic events and house events.

    Attributes:
        name (str): Name of the fault tree.
        gates (Dict[str, Gate]): Gates keyed by id.
        basic_events (Dict[str, BasicEvent]): Basic events keyed by id.
        house_events (Dict[str, HouseEvent]): House events keyed by id.
    """

    name: str
    gates: Dict[str, Gate] = field(default_factory=dict)
    basic_events: Dict[str, BasicEvent] = field(default_factory=dict)
    house_events: Dict[str, HouseEvent] = field(default_factory=dict)

    def add_event(self, event: Event) -> None:
        """Register an event under its id.

        Args:
            event: Gate, basic event or house event.

        Raises:
            RedefinitionError: An event with the same id is already registered.
            InvalidArgument: The event is of an unsupported kind.
        """
        if self._find(event.id) is not None:
            raise RedefinitionError(
                f"Redefinition of event '{event.name}' in fault tree '{self.name}'."
            )
        if isinstance(event, Gate):
            self.gates[event.id] = event
        elif isinstance(event, BasicEvent):
            self.basic_events[event.id] = event
        elif isinstance(event, HouseEvent):
            self.house_events[event.id] = event
        else:
            raise InvalidArgument(f"Unsupported event {event!r}.")
        LOGGER.debug("Fault tree '%s': registered %s", self.name, event)

    def _find(self, event_id: str) -> Optional[Event]:
        for registry in (self.gates, self.basic_events, self.house_events):
            if event_id in registry:
                return registry[event_id]
        return None

    def get_event(self, reference: str) -> Event:
        """Look up an event of any kind by case-insensitive reference.

        Raises:
            UndefinedElement: No event has this id.
        """
        event = self._find(reference.lower())
        if event is None:
            raise UndefinedElement(
                f"Undefined event '{reference}' in fault tree '{self.name}'."
            )
        return event

    def get_gate(self, reference: str) -> Gate:
        return self._get(self.gates, reference, "gate")

    def get_basic_event(self, reference: str) -> BasicEvent:
        return self._get(self.basic_events, reference, "basic event")

    def get_house_event(self, reference: str) -> HouseEvent:
        return self._get(self.house_events, reference, "house event")

    def _get(self, registry: Dict, reference: str, kind: str):
        try:
            return registry[reference.lower()]
        except KeyError:
            raise UndefinedElement(
                f"Undefined {kind} '{reference}' in fault tree '{self.name}'."
            ) from None

    def events(self) -> Iterator[Event]:
        """Iterate over all registered events."""
        yield from self.gates.values()
        yield from self.basic_events.values()
        yield from self.house_events.values()

    def _referenced_ids(self) -> Set[str]:
        referenced: Set[str] = set()
        for gate in self.gates.values():
            if gate.formula is None:
                continue
            for formula in _iter_formulas(gate.formula):
                referenced.update(formula.event_args)
        return referenced

    def top_events(self) -> List[Gate]:
        """Return gates that no registered gate refers to."""
        referenced = self._referenced_ids()
        return [gate for gid, gate in self.gates.items() if gid not in referenced]

    def validate(self, config: Optional[ValidationConfig] = None) -> None:
        """Validate the whole model and refresh orphan flags.

        Checks run in order and stop at the first failure: cycles among gates,
        every gate's formula tree, probability expressions of basic events.

        Args:
            config: Validation settings; defaults to ``VALIDATION_CONFIG``.

        Raises:
            CycleError: Gates form a cycle.
            ValidationError: A gate or basic event is malformed.
            LogicError: A gate has no formula.
            SettingsError: The configuration is inconsistent.
        """
        config = config or VALIDATION_CONFIG
        config.check()

        self._check_references(config)
        gates = list(self.gates.values())
        check_cycles(gates)
        for gate in gates:
            gate.validate()

        missing: List[str] = []
        for event in self.basic_events.values():
            if event.has_expression:
                event.validate()
            else:
                missing.append(event.name)
        if missing and config.require_expressions:
            limit = config.max_reported_errors
            listing = ", ".join(sorted(missing)[:limit])
            suffix = f" ... and {len(missing) - limit} more" if len(missing) > limit else ""
            raise ValidationError(
                f"Found {len(missing)} basic event(s) without an expression in "
                f"fault tree '{self.name}': {listing}{suffix}"
            )

        self._update_orphans(config)
        LOGGER.info(
            "Fault tree '%s' is valid: %d gates, %d basic events, %d house events",
            self.name,
            len(self.gates),
            len(self.basic_events),
            len(self.house_events),
        )

    def _check_references(self, config: ValidationConfig) -> None:
        """Ensure formula arguments are the registered events themselves."""
        errors: List[str] = []
        for gate in self.gates.values():
            if gate.formula is None:
                continue
            for formula in _iter_formulas(gate.formula):
                for event_id, event in formula.event_args.items():
                    if self._find(event_id) is not event:
                        errors.append(f"Gate '{gate.name}': '{event.name}'")
        if errors:
            limit = config.max_reported_errors
            listing = "\n  - ".join(errors[:limit])
            suffix = f"\n  ... and {len(errors) - limit} more" if len(errors) > limit else ""
            raise UndefinedElement(
                f"Found {len(errors)} undefined event reference(s) in fault tree "
                f"'{self.name}':\n  - {listing}{suffix}"
            )

    def _update_orphans(self, config: ValidationConfig) -> None:
        referenced = self._referenced_ids()
        orphans: List[str] = []
        for event in self.events():
            # Unreferenced gates are top events, not orphans.
            event.orphan = not isinstance(event, Gate) and event.id not in referenced
            if event.orphan:
                orphans.append(event.name)
        if orphans and config.warn_on_orphans:
            for name in sorted(orphans):
                LOGGER.warning("Orphan event '%s' in fault tree '%s'", name, self.name)
