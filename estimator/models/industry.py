"""Industry model."""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime
from sqlalchemy.sql import func
from estimator.database import Base
from estimator.utils.formatters import iso_datetime


class Industry(Base):
    """Industry a project is built for. Recorded on estimations for reporting."""

    __tablename__ = 'industries'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    slug = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Industry(id={self.id}, slug='{self.slug}')>"

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'slug': self.slug,
            'description': self.description,
            'isActive': self.is_active,
            'createdAt': iso_datetime(self.created_at),
            'updatedAt': iso_datetime(self.updated_at),
        }
