"""Interface abstractions for the car simulator.

Defines behavioral contracts shared by the core and its consumers:
- ModeRules: per-mode placement and judging (abstract base class)
- StepResult, StateSnapshot: immutable state handed to the presentation layer
"""

from car_simulator.interfaces.rules import ModeRules
from car_simulator.interfaces.snapshot import StateSnapshot, StepResult

__all__ = [
    "ModeRules",
    "StateSnapshot",
    "StepResult",
]
