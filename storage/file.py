# storage/file.py
"""
File-backed JSON entity store.

The file holds a single JSON object mapping each kind name to an array of
serialized records of that kind:

     {"Tenant": [{...}, ...], "Site": [...], "Lease": [...]}

Every operation reloads the whole file; every mutation rewrites it. A
process-wide lock serializes read-modify-write cycles and writes go through
a temporary file renamed over the target. Separate processes sharing one
file are still not coordinated.

Read failures during query/list are logged and treated as an empty store;
read or write failures during save/delete raise PersistenceError.
"""
import contextlib
import json
import logging
import os
import tempfile
import threading
from typing import Any, ContextManager, Dict, Iterator, List, Optional

from models import Entity
from .base import EntityStore
from .errors import EntityNotFoundError, PersistenceError
from .registry import TypeDescriptor, TypeRegistry, default_registry

logger = logging.getLogger(__name__)

Buckets = Dict[str, List[Any]]

# Shared by every FileStore in the process.
_LOCK = threading.RLock()


class FileStore(EntityStore):

     def __init__(self, path: str, registry: Optional[TypeRegistry] = None, indent: bool = False):
          self.path = path
          self.registry = registry if registry is not None else default_registry()
          self.indent = indent

     def register(self, model, name: Optional[str] = None) -> "FileStore":
          """Add a kind to the registry. Returns self for chaining."""
          self.registry.register(model, name)
          return self

     def guard(self) -> ContextManager:
          return _LOCK

     def entities(self) -> Iterator[Entity]:
          with _LOCK:
               try:
                    buckets = self._load()
               except PersistenceError as e:
                    logger.warning("Reading %s failed, treating store as empty: %s", self.path, e)
                    buckets = {}
          for descriptor in self.registry:
               for raw in buckets.get(descriptor.name, []):
                    entity = self._decode(descriptor, raw)
                    if entity is not None:
                         yield entity

     def save(self, entity: Entity) -> None:
          descriptor = self.registry.descriptor_for(entity)
          try:
               record = entity.model_dump(mode="json")
          except ValueError as e:
               raise PersistenceError(f"serializing {descriptor.name} {entity.identity()}: {e}") from e
          with _LOCK:
               buckets = self._load()
               bucket = buckets.setdefault(descriptor.name, [])
               index = self._index(descriptor, bucket, entity.identity())
               if index is None:
                    bucket.append(record)
               else:
                    bucket[index] = record
               self._write(buckets)

     def delete(self, entity: Entity) -> None:
          descriptor = self.registry.descriptor_for(entity)
          with _LOCK:
               buckets = self._load()
               bucket = buckets.get(descriptor.name, [])
               index = self._index(descriptor, bucket, entity.identity())
               if index is None:
                    raise EntityNotFoundError(f"{descriptor.name} {entity.identity()} not found")
               del bucket[index]
               self._write(buckets)

     def _index(self, descriptor: TypeDescriptor, bucket: List[Any], identity: str) -> Optional[int]:
          for index, raw in enumerate(bucket):
               stored = self._decode(descriptor, raw)
               if stored is not None and stored.identity() == identity:
                    return index
          return None

     def _decode(self, descriptor: TypeDescriptor, raw: Any) -> Optional[Entity]:
          try:
               return descriptor.allocate(raw)
          except ValueError as e:
               logger.warning("Skipping undecodable %s record in %s: %s", descriptor.name, self.path, e)
               return None

     def _load(self) -> Buckets:
          if not os.path.exists(self.path):
               return {}
          try:
               with open(self.path, "r", encoding="utf-8") as handle:
                    content = handle.read()
          except OSError as e:
               raise PersistenceError(f"reading file: {e}") from e
          if not content.strip():
               return {}
          try:
               buckets = json.loads(content)
          except ValueError as e:
               raise PersistenceError(f"deserializing buckets: {e}") from e
          if not isinstance(buckets, dict):
               raise PersistenceError("deserializing buckets: top level is not an object")
          for name, bucket in buckets.items():
               if not isinstance(bucket, list):
                    raise PersistenceError(f"deserializing buckets: bucket {name} is not an array")
          return buckets

     def _write(self, buckets: Buckets) -> None:
          try:
               content = json.dumps(buckets, indent="\t" if self.indent else None)
          except (TypeError, ValueError) as e:
               raise PersistenceError(f"serializing buckets: {e}") from e

          directory = os.path.dirname(os.path.abspath(self.path))
          try:
               os.makedirs(directory, exist_ok=True)
               fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".store-", suffix=".json")
          except OSError as e:
               raise PersistenceError(f"preparing directories: {e}") from e
          try:
               with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    handle.write(content)
               os.replace(tmp_path, self.path)
          except OSError as e:
               with contextlib.suppress(OSError):
                    os.remove(tmp_path)
               raise PersistenceError(f"writing file: {e}") from e
          logger.debug("Wrote %s", self.path)
