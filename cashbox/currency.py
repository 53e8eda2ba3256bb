"""
Currency Value Module

Fixed-point currency amounts held as whole units and sub-units
(dollars and cents, rupees and paise). Amounts are integers throughout;
NEVER use float for monetary values.
"""

from dataclasses import dataclass
from typing import Union
import logging

SUBUNITS_PER_UNIT = 100
DEFAULT_SYMBOL = "$"

logger = logging.getLogger("cashbox.currency")


def _require_amount(name: str, value: int) -> None:
    # bool is an int subclass but never a valid amount
    if isinstance(value, bool) or not isinstance(value, int):
        logger.debug("Rejected %s=%r: not an integer", name, value)
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        logger.debug("Rejected %s=%r: negative", name, value)
        raise ValueError(f"{name} cannot be negative: {value}")


@dataclass(frozen=True)
class CurrencyValue:
    """
    Immutable non-negative currency amount.
    Sub-units are always normalized into [0, 100).
    """
    units: int = 0
    subunits: int = 0

    def __post_init__(self):
        _require_amount("units", self.units)
        _require_amount("subunits", self.subunits)

        carry, remainder = divmod(self.subunits, SUBUNITS_PER_UNIT)
        if carry:
            logger.debug(
                "Carried %d subunits into %d units", self.subunits, carry
            )
            object.__setattr__(self, 'units', self.units + carry)
            object.__setattr__(self, 'subunits', remainder)

    @classmethod
    def from_subunits(cls, total: int) -> 'CurrencyValue':
        """Build a value from a raw sub-unit count"""
        return cls(0, total)

    @property
    def total_subunits(self) -> int:
        return self.units * SUBUNITS_PER_UNIT + self.subunits

    def add(self, other: 'CurrencyValue') -> 'CurrencyValue':
        """
        Add two values, carrying sub-unit overflow into units.

        Args:
            other: Value to add

        Returns:
            New normalized CurrencyValue

        Raises:
            TypeError: If other is not a CurrencyValue
        """
        if not isinstance(other, CurrencyValue):
            raise TypeError(f"Cannot add CurrencyValue and {type(other).__name__}")
        total_subunits = self.subunits + other.subunits
        total_units = self.units + other.units + total_subunits // SUBUNITS_PER_UNIT
        return CurrencyValue(total_units, total_subunits % SUBUNITS_PER_UNIT)

    def equals(self, other: object) -> bool:
        """Structural equality; normalized values make this numeric equality too"""
        if not isinstance(other, CurrencyValue):
            return False
        return self.units == other.units and self.subunits == other.subunits

    def __add__(self, other: 'CurrencyValue') -> 'CurrencyValue':
        if not isinstance(other, CurrencyValue):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Union[int, 'CurrencyValue']) -> 'CurrencyValue':
        # Lets sum() start from its integer 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __eq__(self, other) -> bool:
        if not isinstance(other, CurrencyValue):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.units, self.subunits))

    def is_zero(self) -> bool:
        """Check if amount is exactly zero"""
        return self.units == 0 and self.subunits == 0

    def to_string(self, symbol: str = DEFAULT_SYMBOL) -> str:
        """Format for display, always with two sub-unit digits"""
        return f"{symbol}{self.units}.{self.subunits:02d}"

    def __str__(self) -> str:
        return self.to_string()
