# models/record.py
"""
EntityRecord model - one serialized entity per row for the SQL entity store.

Rows are keyed by (kind, identity); payload holds the entity's JSON form.
"""
from sqlalchemy import Column, Integer, String, Text, DateTime, UniqueConstraint, func
from .base import Base


class EntityRecord(Base):
     __table_args__ = (
          UniqueConstraint("kind", "identity", name="uq_entity_records_kind_identity"),
     )

     id = Column(Integer, primary_key=True, autoincrement=True)
     kind = Column(String(100), nullable=False, index=True)
     identity = Column(String(255), nullable=False)
     payload = Column(Text, nullable=False)

     # Timestamps
     created_at = Column(DateTime, server_default=func.now(), nullable=False)
     updated_at = Column(DateTime, onupdate=func.now(), nullable=True)

     def __repr__(self):
          return f"<EntityRecord(id={self.id}, kind='{self.kind}', identity='{self.identity}')>"
