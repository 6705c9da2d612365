"""Currency model."""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Numeric, Index, text
from sqlalchemy.sql import func
from estimator.database import Base
from estimator.utils.formatters import to_number, iso_datetime


class Currency(Base):
    """
    Currency a quote can be expressed in.

    exchange_rate is relative to the base currency. At most one row has
    is_base_currency set; the partial unique index below guards it and
    currency_service keeps it true on every write.
    """

    __tablename__ = 'currencies'
    __table_args__ = (
        Index(
            'uq_currencies_single_base',
            'is_base_currency',
            unique=True,
            postgresql_where=text('is_base_currency'),
            sqlite_where=text('is_base_currency = 1'),
        ),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(3), nullable=False, unique=True)
    name = Column(String(100), nullable=False)
    symbol = Column(String(10), nullable=False)
    flag = Column(String(10), nullable=True)
    exchange_rate = Column(Numeric(14, 4), nullable=False, default=1)
    is_base_currency = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Currency(id={self.id}, code='{self.code}', rate={self.exchange_rate}, base={self.is_base_currency})>"

    def to_dict(self):
        return {
            'id': self.id,
            'code': self.code,
            'name': self.name,
            'symbol': self.symbol,
            'flag': self.flag,
            'exchangeRate': to_number(self.exchange_rate, 1.0),
            'isBaseCurrency': self.is_base_currency,
            'isActive': self.is_active,
            'createdAt': iso_datetime(self.created_at),
            'updatedAt': iso_datetime(self.updated_at),
        }
