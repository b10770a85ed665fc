"""faulttree: logical structure of fault trees.

Events connected by Boolean gates form a shared, directed graph. The package
enforces argument uniqueness, operator arity and vote-number rules while the
model is built, and offers graph passes that detect cycles before any
quantitative analysis runs.

Example:
    from faulttree import BasicEvent, ConstantExpression, Formula, Gate

    pump, valve = BasicEvent("Pump"), BasicEvent("Valve")
    pump.expression = ConstantExpression(0.01)
    valve.expression = ConstantExpression(0.02)

    formula = Formula("or")
    formula.add_argument(pump)
    formula.add_argument(valve)

    top = Gate("TopEvent")
    top.formula = formula
    top.validate()
"""

from __future__ import annotations

from faulttree import errors, logging
from faulttree.config import VALIDATION_CONFIG, ValidationConfig
from faulttree.errors import (
    CycleError,
    DuplicateArgumentError,
    Error,
    IllegalOperation,
    InvalidArgument,
    LogicError,
    RedefinitionError,
    SettingsError,
    UndefinedElement,
    ValidationError,
)
from faulttree.graph import check_cycles, detect_cycle, to_digraph, topological_order
from faulttree.model import (
    BasicEvent,
    CcfEvent,
    ConstantExpression,
    Event,
    Expression,
    FaultTree,
    Formula,
    Gate,
    HouseEvent,
    Operator,
    PrimaryEvent,
    UniformDeviate,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "Event",
    "PrimaryEvent",
    "HouseEvent",
    "BasicEvent",
    "CcfEvent",
    "Gate",
    "Formula",
    "Operator",
    "FaultTree",
    "Expression",
    "ConstantExpression",
    "UniformDeviate",
    # Graph passes
    "check_cycles",
    "detect_cycle",
    "to_digraph",
    "topological_order",
    # Configuration
    "ValidationConfig",
    "VALIDATION_CONFIG",
    # Errors
    "Error",
    "InvalidArgument",
    "LogicError",
    "IllegalOperation",
    "SettingsError",
    "ValidationError",
    "RedefinitionError",
    "DuplicateArgumentError",
    "UndefinedElement",
    "CycleError",
    # Utilities
    "errors",
    "logging",
]
