# models/base.py
import re

from sqlalchemy.orm import DeclarativeBase, declared_attr


class Base(DeclarativeBase):
     """
     Base class for SQLAlchemy models backing the SQL entity store.
     """

     @declared_attr.directive
     def __tablename__(cls) -> str:
          """
          Automatically generate table name from class name.
          Example: EntityRecord -> entity_records
          """
          name = re.sub(r'(?<!^)(?=[A-Z])', '_', cls.__name__).lower()
          # Pluralize (simple version)
          if name.endswith('y'):
               return name[:-1] + 'ies'
          elif name.endswith('s'):
               return name + 'es'
          return name + 's'
