# models/location.py
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from .base import Base
from .types import PointType


class Location(Base):
     """
     Location model - postal address plus a geocoded point (SRID 4326).
     """
     __tablename__ = "locations"

     id = Column(Integer, primary_key=True, autoincrement=True)
     address = Column(String(255), nullable=False)
     city = Column(String(100), nullable=False)
     state = Column(String(100), nullable=False)
     country = Column(String(100), nullable=False)
     postal_code = Column(String(20), nullable=False)
     coordinates = Column(PointType(), nullable=False)

     properties = relationship("Property", back_populates="location")

     def __repr__(self):
          return f"<Location(id={self.id}, address='{self.address}', city='{self.city}')>"
