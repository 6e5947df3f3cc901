# storage/__init__.py
from typing import Optional

import config
from .base import EntityStore
from .errors import (
     StorageError,
     EntityNotFoundError,
     DuplicateEntityError,
     EntityConflictError,
     PersistenceError,
     UnregisteredKindError,
)
from .file import FileStore
from .memory import MemoryStore
from .predicates import Predicate, Predicates, apply, is_kind, where, has_identity
from .registry import TypeDescriptor, TypeRegistry, default_registry


def open_store(
     backend: Optional[str] = None,
     path: Optional[str] = None,
     registry: Optional[TypeRegistry] = None,
) -> EntityStore:
     """
     Build the entity store selected by config.STORAGE_BACKEND.

     Args:
          backend: "memory", "file" or "sql" (defaults to config)
          path: JSON file for the file backend (defaults to config.STORAGE_PATH)
          registry: Type registry for serialized backends
     """
     backend = (backend or config.STORAGE_BACKEND).lower()
     if backend == "memory":
          return MemoryStore()
     if backend == "file":
          return FileStore(path or config.STORAGE_PATH, registry=registry, indent=config.STORAGE_INDENT)
     if backend == "sql":
          from database import init_db
          from .sql import SqlStore
          init_db()
          return SqlStore(registry=registry)
     raise ValueError(f"Unknown storage backend: {backend!r}")


__all__ = [
     "EntityStore",
     "MemoryStore",
     "FileStore",
     "StorageError",
     "EntityNotFoundError",
     "DuplicateEntityError",
     "EntityConflictError",
     "PersistenceError",
     "UnregisteredKindError",
     "Predicate",
     "Predicates",
     "apply",
     "is_kind",
     "where",
     "has_identity",
     "TypeDescriptor",
     "TypeRegistry",
     "default_registry",
     "open_store",
]
