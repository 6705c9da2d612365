"""Contact request model."""
import enum
from sqlalchemy import Column, Integer, String, Text, DateTime
from sqlalchemy.sql import func
from estimator.database import Base
from estimator.utils.formatters import iso_datetime


class ContactStatus(enum.Enum):
    """Contact status enum."""
    NEW = "new"
    IN_PROGRESS = "in-progress"
    RESPONDED = "responded"
    CLOSED = "closed"


class Contact(Base):
    """Message left through the site's contact form."""

    __tablename__ = 'contacts'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    company = Column(String(255), nullable=True)
    project_type = Column(String(255), nullable=True)
    message = Column(Text, nullable=False)
    status = Column(String(20), nullable=False, default=ContactStatus.NEW.value, index=True)
    responded_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Contact(id={self.id}, email='{self.email}', status='{self.status}')>"

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'company': self.company,
            'projectType': self.project_type,
            'message': self.message,
            'status': self.status,
            'respondedAt': iso_datetime(self.responded_at),
            'createdAt': iso_datetime(self.created_at),
            'updatedAt': iso_datetime(self.updated_at),
        }
