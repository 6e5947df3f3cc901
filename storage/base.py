# storage/base.py
"""
Entity store contract.

Backends provide ordered iteration plus upsert and delete; the query, list,
create and update operations are built on top of those here so every backend
enforces the same uniqueness rules.
"""
import abc
import contextlib
import logging
from typing import ContextManager, Iterator, List, Optional

from models import Entity
from .errors import DuplicateEntityError, EntityConflictError, EntityNotFoundError
from .predicates import Predicate, Predicates

logger = logging.getLogger(__name__)


class EntityStore(abc.ABC):
     """Authoritative collection of heterogeneous, uniquely identified entities."""

     @abc.abstractmethod
     def entities(self) -> Iterator[Entity]:
          """Iterate every stored entity in storage order."""

     @abc.abstractmethod
     def save(self, entity: Entity) -> None:
          """Replace the stored entity with the same identity, or append it."""

     @abc.abstractmethod
     def delete(self, entity: Entity) -> None:
          """Remove the stored entity with the same identity.

          Raises:
               EntityNotFoundError: If nothing with that identity is stored
          """

     def guard(self) -> ContextManager:
          """Held around check-then-write sequences; backends may lock here."""
          return contextlib.nullcontext()

     def query(self, *predicates: Predicate) -> Optional[Entity]:
          """First entity satisfying every predicate, or None."""
          match = Predicates(predicates)
          for entity in self.entities():
               if match(entity):
                    return entity
          return None

     def list(self, *predicates: Predicate) -> List[Entity]:
          """All entities satisfying every predicate, in storage order."""
          match = Predicates(predicates)
          return [entity for entity in self.entities() if match(entity)]

     def find(self, entity: Entity) -> Optional[Entity]:
          """Stored version of entity, matched by kind and identity."""
          return self.query(lambda stored: isinstance(stored, Entity) and stored.same_entity(entity))

     def create(self, entity: Entity) -> None:
          """
          Store a new entity.

          Raises:
               DuplicateEntityError: If the identity is already taken
               EntityConflictError: If the conflict key is already taken
          """
          with self.guard():
               self._check_unique(entity, replacing=False)
               self.save(entity)
          logger.debug("created %s %s", entity.kind(), entity.identity())

     def update(self, entity: Entity) -> None:
          """
          Replace an existing entity.

          Raises:
               EntityNotFoundError: If no entity with this identity is stored
               EntityConflictError: If another entity holds the conflict key
          """
          with self.guard():
               if self.find(entity) is None:
                    raise EntityNotFoundError(f"{entity.kind()} {entity.identity()} not found")
               self._check_unique(entity, replacing=True)
               self.save(entity)
          logger.debug("updated %s %s", entity.kind(), entity.identity())

     def _check_unique(self, entity: Entity, replacing: bool) -> None:
          key = entity.conflict_key()
          for stored in self.entities():
               if not isinstance(stored, Entity) or stored.kind() != entity.kind():
                    continue
               if stored.identity() == entity.identity():
                    if replacing:
                         continue
                    raise DuplicateEntityError(f"{entity.kind()} {entity.identity()} already exists")
               if key is not None and stored.conflict_key() == key:
                    raise EntityConflictError(
                         f"{entity.kind()} {entity.identity()} conflicts with {stored.identity()}"
                    )
