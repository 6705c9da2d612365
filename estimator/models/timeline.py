"""Delivery timeline model."""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, Numeric
from sqlalchemy.sql import func
from estimator.database import Base
from estimator.utils.formatters import to_number, iso_datetime


class Timeline(Base):
    """Delivery timeline. Its multiplier scales the summed price (express > 1, extended < 1)."""

    __tablename__ = 'timelines'

    id = Column(Integer, primary_key=True, autoincrement=True)
    label = Column(String(50), nullable=False, unique=True)
    duration_in_months = Column(Integer, nullable=False, index=True)
    multiplier = Column(Numeric(3, 2), nullable=False, default=1)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Timeline(id={self.id}, label='{self.label}', multiplier={self.multiplier})>"

    def to_dict(self):
        return {
            'id': self.id,
            'label': self.label,
            'durationInMonths': self.duration_in_months,
            'multiplier': to_number(self.multiplier, 1.0),
            'description': self.description,
            'isActive': self.is_active,
            'createdAt': iso_datetime(self.created_at),
            'updatedAt': iso_datetime(self.updated_at),
        }
