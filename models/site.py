# models/site.py
import enum

from .entity import Entity


class Dwelling(str, enum.Enum):
     """Kind of dwelling standing on a site."""
     CABIN = "Cabin"
     FLAT = "Flat"
     HOUSE = "House"

     def __str__(self) -> str:
          return self.value


class Site(Entity):
     """
     Site - a lot with a dwelling, leased by at most one tenant at a time.
     Site numbers are unique across all sites.
     """
     number: str
     dwelling: Dwelling = Dwelling.CABIN

     def identity(self) -> str:
          return self.number

     def __repr__(self):
          return f"<Site(number='{self.number}', dwelling='{self.dwelling.value}')>"
