# storage/errors.py


class StorageError(Exception):
     """Base class for entity store failures."""


class EntityNotFoundError(StorageError, LookupError):
     """No stored entity has the requested identity."""


class DuplicateEntityError(StorageError, ValueError):
     """An entity of the same kind already has this identity."""


class EntityConflictError(DuplicateEntityError):
     """An entity of the same kind already holds this conflict key."""


class PersistenceError(StorageError):
     """Serialization, filesystem or database failure while writing."""


class UnregisteredKindError(StorageError, TypeError):
     """The backend has no type descriptor for this kind of entity."""
