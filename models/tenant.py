# models/tenant.py
from .entity import Entity


class Tenant(Entity):
     """
     Tenant - a person who can lease one or more sites.
     Identified by name; contact is where notifications are delivered.
     """
     name: str
     contact: str = ""

     def identity(self) -> str:
          return self.name

     def __repr__(self):
          return f"<Tenant(name='{self.name}', contact='{self.contact}')>"
