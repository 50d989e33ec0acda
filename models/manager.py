# models/manager.py
"""
Manager model - property managers who list properties and review applications.
"""
from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship

from .base import Base


class Manager(Base):
     __tablename__ = "managers"

     id = Column(Integer, primary_key=True, autoincrement=True)
     cognito_id = Column(String(128), unique=True, nullable=False, index=True)
     name = Column(String(200), nullable=False)
     email = Column(String(255), nullable=False)
     phone_number = Column(String(50), nullable=False)
     created_at = Column(DateTime, server_default=func.now(), nullable=False)

     # Relationships
     managed_properties = relationship("Property", back_populates="manager")

     def __repr__(self):
          return f"<Manager(id={self.id}, cognito_id='{self.cognito_id}')>"
