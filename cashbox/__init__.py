"""
Cashbox

A fixed-point currency value type with carry normalization, addition,
equality and display formatting, using integer arithmetic throughout.
"""

from .currency import CurrencyValue, SUBUNITS_PER_UNIT

__version__ = "1.0.0"

__all__ = ["CurrencyValue", "SUBUNITS_PER_UNIT"]
