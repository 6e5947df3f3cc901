# storage/registry.py
"""
Type registry for backends that store entities in serialized form.

A serialized bucket does not say what concrete class its records belong to,
so backends keep a descriptor per kind name that can allocate an instance of
that kind and tell whether a given value is of that kind.
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Mapping, Optional, Type

from models import ENTITY_TYPES, Entity
from .errors import UnregisteredKindError


@dataclass(frozen=True)
class TypeDescriptor:
     name: str
     model: Type[Entity]

     def allocate(self, raw: Optional[Mapping[str, Any]] = None) -> Entity:
          """Allocate an instance of this kind; blank when raw is None."""
          if raw is None:
               return self.model.model_construct()
          return self.model.model_validate(raw)

     def is_instance(self, value: Any) -> bool:
          return type(value) is self.model


class TypeRegistry:
     """Ordered mapping of kind name to TypeDescriptor."""

     def __init__(self):
          self._descriptors: Dict[str, TypeDescriptor] = {}

     def register(self, model: Type[Entity], name: Optional[str] = None) -> "TypeRegistry":
          name = name or model.kind()
          if not name:
               raise ValueError(f"type name is empty for {model!r}")
          self._descriptors[name] = TypeDescriptor(name=name, model=model)
          return self

     def get(self, name: str) -> Optional[TypeDescriptor]:
          return self._descriptors.get(name)

     def descriptor_for(self, value: Any) -> TypeDescriptor:
          for descriptor in self._descriptors.values():
               if descriptor.is_instance(value):
                    return descriptor
          raise UnregisteredKindError(f"no type registered for {type(value).__name__}")

     def kinds(self) -> Iterator[str]:
          return iter(self._descriptors)

     def __contains__(self, name: object) -> bool:
          return name in self._descriptors

     def __iter__(self) -> Iterator[TypeDescriptor]:
          return iter(self._descriptors.values())

     def __len__(self) -> int:
          return len(self._descriptors)


def default_registry() -> TypeRegistry:
     """Registry holding every kind the leasing domain persists."""
     registry = TypeRegistry()
     for model in ENTITY_TYPES:
          registry.register(model)
     return registry
