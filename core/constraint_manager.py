from typing import Callable
from core.state import DetectionState


class ConstraintManager:
    def __init__(self, state: DetectionState):
        self.state = state
        self.rules: list[Callable] = []

    def add_rule(self, rule_func: Callable, condition: bool = True):
        """Register a rule with optional enablement condition."""
        if condition:
            self.rules.append(rule_func)

    def apply_all(self):
        """Apply all registered rules in order and return what they collected."""
        for rule in self.rules:
            rule(self.state)
        return self.state.violations
