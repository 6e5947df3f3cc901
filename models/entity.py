# models/entity.py
from typing import Hashable, Optional

from pydantic import BaseModel


class Entity(BaseModel):
     """
     Base class for uniquely identified records kept by the entity store.

     The kind of an entity is its class name; identity is unique per kind.
     """

     @classmethod
     def kind(cls) -> str:
          return cls.__name__

     def identity(self) -> str:
          raise NotImplementedError(f"{self.kind()} does not define an identity")

     def conflict_key(self) -> Optional[Hashable]:
          """
          Secondary key that must also be unique within the kind.
          None means the kind has no such constraint.
          """
          return None

     def same_entity(self, other: "Entity") -> bool:
          """True when both values refer to the same stored record."""
          return self.kind() == other.kind() and self.identity() == other.identity()
