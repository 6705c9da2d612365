"""Feature model."""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, Numeric, JSON
from sqlalchemy.sql import func
from estimator.database import Base
from estimator.utils.formatters import to_number, iso_datetime


class Feature(Base):
    """Optional feature added on top of the software type price."""

    __tablename__ = 'features'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    category = Column(String(50), nullable=False, index=True)
    base_price = Column(Numeric(12, 2), nullable=False, default=0)
    estimated_hours = Column(Integer, nullable=False)
    complexity = Column(String(20), nullable=False, default='medium')
    description = Column(Text, nullable=True)
    prerequisites = Column(JSON, nullable=True)  # feature ids
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Feature(id={self.id}, name='{self.name}', base_price={self.base_price})>"

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'basePrice': to_number(self.base_price, 0),
            'estimatedHours': self.estimated_hours,
            'complexity': self.complexity,
            'description': self.description,
            'prerequisites': list(self.prerequisites or []),
            'isActive': self.is_active,
            'createdAt': iso_datetime(self.created_at),
            'updatedAt': iso_datetime(self.updated_at),
        }
