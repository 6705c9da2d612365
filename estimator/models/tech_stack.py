"""Tech stack model."""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, Numeric
from sqlalchemy.sql import func
from estimator.database import Base
from estimator.utils.formatters import to_number, iso_datetime

TECH_STACK_CATEGORIES = ('backend', 'frontend', 'mobile', 'database', 'cloud', 'other')
DIFFICULTY_LEVELS = ('beginner', 'intermediate', 'advanced')


class TechStack(Base):
    """Technology offered in the wizard, grouped by category."""

    __tablename__ = 'tech_stacks'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, index=True)
    category = Column(String(20), nullable=False, index=True)
    version = Column(String(50), nullable=True)
    description = Column(Text, nullable=True)
    difficulty_level = Column(String(20), nullable=False, default='intermediate')
    hourly_rate_multiplier = Column(Numeric(3, 2), nullable=False, default=1)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<TechStack(id={self.id}, name='{self.name}', category='{self.category}')>"

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'version': self.version,
            'description': self.description,
            'difficultyLevel': self.difficulty_level,
            'hourlyRateMultiplier': to_number(self.hourly_rate_multiplier, 1.0),
            'isActive': self.is_active,
            'createdAt': iso_datetime(self.created_at),
            'updatedAt': iso_datetime(self.updated_at),
        }
