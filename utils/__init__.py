# utils/__init__.py
from .currency import Currency, MILL, CENT, DOLLAR

__all__ = [
     "Currency",
     "MILL",
     "CENT",
     "DOLLAR",
]
