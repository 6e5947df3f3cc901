# utils/currency.py
"""
Fixed-precision money.

Amounts are held as an integer count of mills (1/10 of a cent) so that
balances summed over many small transactions never drift. Decimal is only
used at the edges, when converting to and from dollar amounts.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Union

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema


_MILLS_PER_DOLLAR = 1000
_CENTS = Decimal("0.01")
_MILLS = Decimal("0.001")


class Currency(int):
     """Integer amount of mills with money-aware arithmetic and formatting."""

     def __new__(cls, mills: int = 0):
          return super().__new__(cls, mills)

     @classmethod
     def from_decimal(cls, amount: Union[Decimal, str, int, float]) -> "Currency":
          """Convert a dollar amount (e.g. Decimal("12.345")) to Currency."""
          if isinstance(amount, float):
               amount = str(amount)
          mills = (Decimal(amount) * _MILLS_PER_DOLLAR).to_integral_value(rounding=ROUND_HALF_UP)
          return cls(int(mills))

     def to_decimal(self) -> Decimal:
          """Dollar amount at full mill precision."""
          return (Decimal(int(self)) / _MILLS_PER_DOLLAR).quantize(_MILLS)

     def mills(self) -> int:
          return int(self)

     def cents(self) -> int:
          """Whole cents, truncated toward zero."""
          cents = abs(int(self)) // int(CENT)
          return -cents if self < 0 else cents

     def dollars(self) -> Decimal:
          return self.to_decimal().quantize(_CENTS, rounding=ROUND_HALF_UP)

     def __add__(self, other):
          if not isinstance(other, int):
               return NotImplemented
          return Currency(int(self) + int(other))

     __radd__ = __add__

     def __sub__(self, other):
          if not isinstance(other, int):
               return NotImplemented
          return Currency(int(self) - int(other))

     def __rsub__(self, other):
          if not isinstance(other, int):
               return NotImplemented
          return Currency(int(other) - int(self))

     def __mul__(self, other):
          if not isinstance(other, int) or isinstance(other, Currency):
               return NotImplemented
          return Currency(int(self) * other)

     __rmul__ = __mul__

     def __neg__(self):
          return Currency(-int(self))

     def __abs__(self):
          return Currency(abs(int(self)))

     def __str__(self) -> str:
          sign = "-" if int(self) < 0 else ""
          return f"{sign}${abs(self).dollars()}"

     def __repr__(self) -> str:
          return f"Currency({int(self)})"

     @classmethod
     def __get_pydantic_core_schema__(
          cls, source_type: Any, handler: GetCoreSchemaHandler
     ) -> core_schema.CoreSchema:
          # Stored and serialized as a plain integer count of mills.
          return core_schema.no_info_after_validator_function(
               cls,
               core_schema.int_schema(),
               serialization=core_schema.plain_serializer_function_ser_schema(int),
          )


MILL = Currency(1)
CENT = Currency(10)
DOLLAR = Currency(100 * 10)
