"""Mode rules registry and factory.

Provides discovery and instantiation of mode rules that are registered
globally during module initialization.

Mode implementations must call register_rules() at import time for
auto-discovery. Importing car_simulator.modes does this for every
bundled mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Type

from car_simulator.core.enums import Mode

if TYPE_CHECKING:
    from car_simulator.interfaces.rules import ModeRules
    from car_simulator.utils.config_loader import GameConfig


class RulesRegistry:
    """Registry of available mode rules implementations.

    THREAD SAFETY: Not thread-safe. All registration should happen
    during module initialization before any threads are spawned.
    """

    def __init__(self):
        self._rules: dict[Mode, Type[ModeRules]] = {}

    def register(self, mode: Mode, rules_class: Type[ModeRules]) -> None:
        """Register a rules implementation for a mode."""
        if mode in self._rules:
            raise ValueError(f"Rules for mode '{mode.value}' already registered")
        self._rules[mode] = rules_class

    def get(self, mode: Mode) -> Type[ModeRules]:
        """Get a rules class by mode."""
        if mode not in self._rules:
            available = [m.value for m in self._rules]
            raise ValueError(f"Unknown mode '{mode}'. Available: {available}")
        return self._rules[mode]

    def list_modes(self) -> list[Mode]:
        """List all registered modes."""
        return list(self._rules.keys())

    def create(self, mode: Mode, config: GameConfig) -> ModeRules:
        """Instantiate the rules for a mode."""
        rules_class = self.get(mode)
        return rules_class(config)


# Global registry
_REGISTRY = RulesRegistry()


def register_rules(mode: Mode, rules_class: Type[ModeRules]) -> None:
    """Register mode rules globally."""
    _REGISTRY.register(mode, rules_class)


def get_rules(mode: Mode) -> Type[ModeRules]:
    """Get a rules class by mode."""
    return _REGISTRY.get(mode)


def create_rules(mode: Mode, config: GameConfig) -> ModeRules:
    """Create a rules instance for a mode."""
    return _REGISTRY.create(mode, config)


def list_available_modes() -> list[Mode]:
    """List all registered modes."""
    return _REGISTRY.list_modes()


def verify_modes_registered() -> None:
    """Verify that every Mode has registered rules.

    This is a diagnostic function to catch import/registration issues.

    Raises:
        RuntimeError: If any mode is missing its rules
    """
    missing = [mode.value for mode in Mode if mode not in _REGISTRY.list_modes()]
    if missing:
        raise RuntimeError(
            f"No rules registered for modes {missing}! Ensure mode modules are "
            "imported. Example: import car_simulator.modes"
        )
