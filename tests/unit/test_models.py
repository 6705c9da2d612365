"""
Unit tests for SQLAlchemy models.
"""

from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from estimator.models import (
    Currency, Industry, Estimation, EstimationSelection, TechStackSelection, Contact,
)


class TestCurrencyModel:
    """Tests for Currency model."""

    def test_to_dict(self, session):
        currency = Currency(code='INR', name='Indian Rupee', symbol='₹', flag='🇮🇳', exchange_rate=Decimal('83'))
        session.add(currency)
        session.commit()

        data = currency.to_dict()
        assert data['code'] == 'INR'
        assert data['exchangeRate'] == 83
        assert data['isBaseCurrency'] is False
        assert data['isActive'] is True
        assert data['createdAt'] is not None

    def test_code_unique(self, session):
        session.add(Currency(code='USD', name='US Dollar', symbol='$'))
        session.commit()

        session.add(Currency(code='USD', name='Another Dollar', symbol='$'))
        with pytest.raises(IntegrityError):
            session.commit()

    def test_only_one_base_currency(self, session):
        """The partial unique index rejects a second base currency."""
        session.add(Currency(code='USD', name='US Dollar', symbol='$', is_base_currency=True))
        session.commit()

        session.add(Currency(code='EUR', name='Euro', symbol='€', is_base_currency=True))
        with pytest.raises(IntegrityError):
            session.commit()

    def test_many_non_base_currencies(self, session):
        session.add_all([
            Currency(code='INR', name='Indian Rupee', symbol='₹'),
            Currency(code='GBP', name='British Pound', symbol='£'),
        ])
        session.commit()
        assert session.query(Currency).count() == 2


class TestIndustryModel:

    def test_slug_unique(self, session):
        session.add(Industry(name='Fintech', slug='fintech'))
        session.commit()

        session.add(Industry(name='FinTech', slug='fintech'))
        with pytest.raises(IntegrityError):
            session.commit()


class TestEstimationModel:
    """Tests for Estimation model."""

    def test_selection_round_trips_through_json_columns(self, session):
        selection = EstimationSelection(
            software_types=['Web App'],
            timeline='3-6 months',
            currency='INR',
            industries=['Fintech'],
            tech_stack=TechStackSelection(frontend='React'),
            feature_ids=[2],
        )
        estimation = Estimation(
            **selection.to_columns(),
            timeline_multiplier=Decimal('1.0'),
            exchange_rate=Decimal('83'),
            base_price=Decimal('1245000'),
            features_price=Decimal('415000'),
            total_price=Decimal('1660000'),
        )
        session.add(estimation)
        session.commit()

        stored = session.get(Estimation, estimation.id).selection
        assert stored.software_types == ['Web App']
        assert stored.industries == ['Fintech']
        assert stored.tech_stack == TechStackSelection(frontend='React')
        assert stored.feature_ids == [2]

        data = estimation.to_dict()
        assert data['status'] == 'draft'
        assert data['totalPrice'] == 1660000
        assert data['techStack'] == {
            'backend': '', 'frontend': 'React', 'mobile': '', 'database': '', 'cloud': '', 'other': '',
        }
        assert data['lineItems'] == {}


class TestContactModel:

    def test_defaults(self, session):
        contact = Contact(name='Jane', email='jane@example.com', message='Hello')
        session.add(contact)
        session.commit()

        data = contact.to_dict()
        assert data['status'] == 'new'
        assert data['respondedAt'] is None
