# storage/sql.py
"""
SQL entity store.

Same contract as the other backends, persisted through SQLAlchemy: one
EntityRecord row per entity holding its JSON payload, ordered by insertion.
Read failures during query/list are logged and treated as an empty store;
failures while saving or deleting raise PersistenceError. Guarded sequences
are serialized per store instance; other processes sharing the database
are not coordinated.
"""
import json
import logging
import threading
from typing import Callable, ContextManager, Iterator, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_session_context
from models import Entity, EntityRecord
from .base import EntityStore
from .errors import EntityNotFoundError, PersistenceError
from .registry import TypeRegistry, default_registry

logger = logging.getLogger(__name__)


class SqlStore(EntityStore):

     def __init__(
          self,
          session_factory: Optional[Callable[[], Session]] = None,
          registry: Optional[TypeRegistry] = None,
     ):
          self.session_factory = session_factory
          self.registry = registry if registry is not None else default_registry()
          self._lock = threading.RLock()

     def guard(self) -> ContextManager:
          return self._lock

     def entities(self) -> Iterator[Entity]:
          try:
               with get_session_context(self.session_factory) as db:
                    rows = [
                         (record.kind, record.payload)
                         for record in db.query(EntityRecord).order_by(EntityRecord.id).all()
                    ]
          except SQLAlchemyError as e:
               logger.warning("Reading entity records failed, treating store as empty: %s", e)
               return

          for kind, payload in rows:
               descriptor = self.registry.get(kind)
               if descriptor is None:
                    continue
               try:
                    yield descriptor.allocate(json.loads(payload))
               except ValueError as e:
                    logger.warning("Skipping undecodable %s record: %s", kind, e)

     def save(self, entity: Entity) -> None:
          descriptor = self.registry.descriptor_for(entity)
          identity = entity.identity()
          try:
               payload = entity.model_dump_json()
          except ValueError as e:
               raise PersistenceError(f"serializing {descriptor.name} {identity}: {e}") from e
          try:
               with get_session_context(self.session_factory) as db:
                    record = (
                         db.query(EntityRecord)
                         .filter(EntityRecord.kind == descriptor.name, EntityRecord.identity == identity)
                         .first()
                    )
                    if record is None:
                         db.add(EntityRecord(kind=descriptor.name, identity=identity, payload=payload))
                    else:
                         record.payload = payload
          except SQLAlchemyError as e:
               raise PersistenceError(f"saving {descriptor.name} {identity}: {e}") from e

     def delete(self, entity: Entity) -> None:
          descriptor = self.registry.descriptor_for(entity)
          identity = entity.identity()
          try:
               with get_session_context(self.session_factory) as db:
                    record = (
                         db.query(EntityRecord)
                         .filter(EntityRecord.kind == descriptor.name, EntityRecord.identity == identity)
                         .first()
                    )
                    if record is None:
                         raise EntityNotFoundError(f"{descriptor.name} {identity} not found")
                    db.delete(record)
          except SQLAlchemyError as e:
               raise PersistenceError(f"deleting {descriptor.name} {identity}: {e}") from e
