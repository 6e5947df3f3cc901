# storage/predicates.py
"""
Composable predicates over opaque entity values.

A predicate takes any stored value and answers whether it matches. Predicates
built here check the concrete kind themselves and answer False for other kinds
rather than raising, so one predicate list can be run across a heterogeneous
collection.
"""
from typing import Any, Callable, Iterable, Optional, Type

Predicate = Callable[[Any], bool]


class Predicates(list):
     """
     A list of predicates that is itself a predicate.

     Matches when every member matches (logical AND), stopping at the first
     failure. An empty list matches everything.
     """

     def __call__(self, entity: Any) -> bool:
          for predicate in self:
               if not predicate(entity):
                    return False
          return True


def apply(entity: Any, predicates: Iterable[Predicate]) -> bool:
     """Test entity against all predicates."""
     return Predicates(predicates)(entity)


def is_kind(kind: Type, test: Optional[Callable[[Any], bool]] = None) -> Predicate:
     """
     Match values of the given kind, optionally narrowed by test.
     test is only called with values of that kind.
     """
     def predicate(entity: Any) -> bool:
          if not isinstance(entity, kind):
               return False
          return test is None or bool(test(entity))
     return predicate


def where(kind: Type, **fields: Any) -> Predicate:
     """
     Match values of the given kind whose attributes equal the given fields.

     Example:
          where(Lease, site="A1", term=term)
     """
     def test(entity: Any) -> bool:
          return all(getattr(entity, name, None) == value for name, value in fields.items())
     return is_kind(kind, test)


def has_identity(kind: Type, identity: str) -> Predicate:
     """Match the stored value of the given kind with this identity."""
     return is_kind(kind, lambda entity: entity.identity() == identity)
