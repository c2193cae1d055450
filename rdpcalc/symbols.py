"""Named variables and the table that holds them."""

from __future__ import annotations

from dataclasses import dataclass

from .tokens import CalculatorError


@dataclass
class Variable:
    """A named value; a constant one cannot be reassigned."""

    name: str
    value: float
    constant: bool = False


class SymbolTable:
    """Variables in the order they were declared."""

    def __init__(self) -> None:
        self._variables: dict[str, Variable] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._variables

    def __iter__(self):
        return iter(self._variables.values())

    def __len__(self) -> int:
        return len(self._variables)

    def is_declared(self, name: str) -> bool:
        """Return whether a variable called ``name`` exists."""
        return name in self._variables

    def get_value(self, name: str) -> float:
        """Return the value of the variable called ``name``."""
        try:
            return self._variables[name].value
        except KeyError:
            raise CalculatorError(f"get: undefined variable {name}") from None

    def set_value(self, name: str, value: float) -> float:
        """Assign ``value`` to an existing, non-constant variable and return it."""
        try:
            variable = self._variables[name]
        except KeyError:
            raise CalculatorError(f"set: undefined variable {name}") from None
        if variable.constant:
            raise CalculatorError("Can't overwrite constant variable")
        variable.value = value
        return value

    def define_name(self, name: str, value: float, constant: bool = False) -> float:
        """Declare a new variable and return its value."""
        if self.is_declared(name):
            raise CalculatorError(f"{name} declared twice")
        self._variables[name] = Variable(name, value, constant)
        return value