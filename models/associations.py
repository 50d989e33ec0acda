# models/associations.py
"""
Many-to-many link tables between tenants and properties.

- tenant_favorites: properties a tenant has bookmarked
- tenant_residences: properties a tenant currently lives in
"""
from sqlalchemy import Column, ForeignKey, Integer, Table

from .base import Base

tenant_favorites = Table(
     "tenant_favorites",
     Base.metadata,
     Column("tenant_id", Integer, ForeignKey("tenants.id", ondelete="CASCADE"), primary_key=True),
     Column("property_id", Integer, ForeignKey("properties.id", ondelete="CASCADE"), primary_key=True),
)

tenant_residences = Table(
     "tenant_residences",
     Base.metadata,
     Column("tenant_id", Integer, ForeignKey("tenants.id", ondelete="CASCADE"), primary_key=True),
     Column("property_id", Integer, ForeignKey("properties.id", ondelete="CASCADE"), primary_key=True),
)
