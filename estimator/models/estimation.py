"""Estimation model: a persisted price quote."""
import enum
from sqlalchemy import Column, Integer, String, DateTime, Numeric, JSON
from sqlalchemy.sql import func
from estimator.database import Base
from estimator.models.selection import EstimationSelection, TechStackSelection
from estimator.utils.formatters import to_number, iso_datetime


class EstimationStatus(enum.Enum):
    """Estimation status enum."""
    DRAFT = "draft"
    SENT = "sent"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Estimation(Base):
    """
    Estimation (price quote snapshot).

    Prices are computed once at creation and never recalculated; only
    status changes afterwards. Amounts are stored at full precision in the
    selected currency.
    """

    __tablename__ = 'estimations'

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Selection snapshot
    industries = Column(JSON, nullable=False, default=list)
    software_types = Column(JSON, nullable=False, default=list)
    tech_stack = Column(JSON, nullable=False, default=dict)
    timeline = Column(String(50), nullable=False)
    timeline_multiplier = Column(Numeric(6, 4), nullable=False)
    feature_ids = Column(JSON, nullable=False, default=list)
    currency = Column(String(3), nullable=False, default='USD')
    exchange_rate = Column(Numeric(14, 4), nullable=False, default=1)

    # Computed prices. Scales hold price(2) x rate(4) x multiplier(4) exactly
    base_price = Column(Numeric(24, 6), nullable=False)
    features_price = Column(Numeric(24, 6), nullable=False)
    total_price = Column(Numeric(28, 10), nullable=False)
    line_items = Column(JSON, nullable=False, default=dict)

    contact_name = Column(String(255), nullable=True)
    contact_email = Column(String(255), nullable=True)
    contact_company = Column(String(255), nullable=True)
    status = Column(String(20), nullable=False, default=EstimationStatus.DRAFT.value, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Estimation(id={self.id}, currency='{self.currency}', total={self.total_price}, status='{self.status}')>"

    @property
    def selection(self) -> EstimationSelection:
        """Stored JSON columns as a typed selection."""
        return EstimationSelection(
            software_types=list(self.software_types or []),
            timeline=self.timeline,
            currency=self.currency,
            industries=list(self.industries or []),
            tech_stack=TechStackSelection.from_payload(self.tech_stack),
            feature_ids=[int(fid) for fid in (self.feature_ids or [])],
            timeline_multiplier=to_number(self.timeline_multiplier),
        )

    def to_dict(self):
        selection = self.selection
        return {
            'id': self.id,
            'industries': selection.industries,
            'softwareType': selection.software_types,
            'techStack': selection.tech_stack.to_dict(),
            'timeline': selection.timeline,
            'timelineMultiplier': selection.timeline_multiplier,
            'features': selection.feature_ids,
            'currency': selection.currency,
            'exchangeRate': to_number(self.exchange_rate, 1.0),
            'basePrice': to_number(self.base_price, 0),
            'featuresPrice': to_number(self.features_price, 0),
            'totalPrice': to_number(self.total_price, 0),
            'lineItems': self.line_items or {},
            'contactName': self.contact_name,
            'contactEmail': self.contact_email,
            'contactCompany': self.contact_company,
            'status': self.status,
            'createdAt': iso_datetime(self.created_at),
            'updatedAt': iso_datetime(self.updated_at),
        }
