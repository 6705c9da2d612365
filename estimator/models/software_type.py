"""Software type model."""
from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, Numeric
from sqlalchemy.sql import func
from estimator.database import Base
from estimator.utils.formatters import to_number, iso_datetime

SOFTWARE_CATEGORIES = ('web', 'mobile', 'desktop', 'api', 'other')
COMPLEXITY_LEVELS = ('simple', 'medium', 'complex')


class SoftwareType(Base):
    """
    Kind of software being estimated (Web App, Mobile App, ...).

    base_price is expressed in base-currency units; several types may be
    selected on one estimation and their prices add up.
    """

    __tablename__ = 'software_types'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    category = Column(String(20), nullable=False, index=True)
    base_price = Column(Numeric(12, 2), nullable=False, default=0)
    complexity = Column(String(20), nullable=False, default='medium')
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<SoftwareType(id={self.id}, name='{self.name}', base_price={self.base_price})>"

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'category': self.category,
            'basePrice': to_number(self.base_price, 0),
            'complexity': self.complexity,
            'description': self.description,
            'isActive': self.is_active,
            'createdAt': iso_datetime(self.created_at),
            'updatedAt': iso_datetime(self.updated_at),
        }
