# storage/memory.py
import threading
from typing import ContextManager, Iterable, Iterator, List, Optional

from models import Entity
from .base import EntityStore
from .errors import EntityNotFoundError


class MemoryStore(EntityStore):
     """
     In-memory store: one ordered, heterogeneous list of entities.

     Deleting empties the slot instead of compacting the list, so positions
     stay stable while iterating. Values are copied in and out, callers never
     hold a reference to the stored instance. Nothing survives a restart.
     A re-entrant lock serializes writes and guarded sequences.
     """

     def __init__(self, entities: Iterable[Entity] = ()):
          self._slots: List[Optional[Entity]] = []
          self._lock = threading.RLock()
          for entity in entities:
               self.save(entity)

     def guard(self) -> ContextManager:
          return self._lock

     def entities(self) -> Iterator[Entity]:
          for slot in list(self._slots):
               if slot is not None:
                    yield slot.model_copy(deep=True)

     def save(self, entity: Entity) -> None:
          copy = entity.model_copy(deep=True)
          with self._lock:
               index = self._index(entity)
               if index is None:
                    self._slots.append(copy)
               else:
                    self._slots[index] = copy

     def delete(self, entity: Entity) -> None:
          with self._lock:
               index = self._index(entity)
               if index is None:
                    raise EntityNotFoundError(f"{entity.kind()} {entity.identity()} not found")
               self._slots[index] = None

     def __len__(self) -> int:
          return sum(1 for slot in self._slots if slot is not None)

     def _index(self, entity: Entity) -> Optional[int]:
          for index, slot in enumerate(self._slots):
               if slot is not None and slot.same_entity(entity):
                    return index
          return None
