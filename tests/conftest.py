import os
import tempfile
from decimal import Decimal

import pytest

# Point the testing config at a throwaway SQLite file before config is imported
_db_fd, _db_path = tempfile.mkstemp(prefix='estimator-test-', suffix='.db')
os.environ.setdefault('TEST_DATABASE_URL', f'sqlite:///{_db_path}')

from estimator import create_app
from estimator.database import create_tables, drop_tables, get_session
from estimator.models import SoftwareType, Feature, Currency, Timeline, Industry, TechStack


@pytest.fixture(scope='session')
def app():
    """Create application instance for testing."""
    app = create_app('config.TestingConfig')
    yield app
    os.close(_db_fd)
    if os.path.exists(_db_path):
        os.unlink(_db_path)


@pytest.fixture(autouse=True)
def database(app):
    """Fresh schema for every test."""
    get_session().remove()
    drop_tables()
    create_tables()
    yield
    get_session().remove()


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def session():
    """Database session (scoped; requests made by the client share it)."""
    session = get_session()
    yield session
    session.rollback()


@pytest.fixture(scope='function')
def catalog(session):
    """
    Minimal pricing catalog.

    Returns ids only: the request teardown closes the scoped session, so
    ORM instances created here would be detached by the time tests use them.
    """
    web_app = SoftwareType(name='Web App', category='web', base_price=Decimal('15000'), complexity='simple')
    mobile_app = SoftwareType(name='Mobile App', category='mobile', base_price=Decimal('25000'))
    payment = Feature(name='Payment Gateway', category='commerce', base_price=Decimal('5000'), estimated_hours=80)
    login = Feature(name='User Login/Registration', category='authentication',
                    base_price=Decimal('2000'), estimated_hours=40)
    usd = Currency(code='USD', name='US Dollar', symbol='$', exchange_rate=Decimal('1'), is_base_currency=True)
    inr = Currency(code='INR', name='Indian Rupee', symbol='₹', exchange_rate=Decimal('83'))
    standard = Timeline(label='3-6 months', duration_in_months=6, multiplier=Decimal('1.0'))
    express = Timeline(label='1-2 months', duration_in_months=2, multiplier=Decimal('1.5'))
    fintech = Industry(name='Fintech', slug='fintech')
    react = TechStack(name='React', category='frontend')
    python = TechStack(name='Python', category='backend')

    rows = [web_app, mobile_app, payment, login, usd, inr, standard, express, fintech, react, python]
    session.add_all(rows)
    session.commit()

    ids = {
        'web_app': web_app.id,
        'mobile_app': mobile_app.id,
        'payment_gateway': payment.id,
        'login': login.id,
        'usd': usd.id,
        'inr': inr.id,
        'standard': standard.id,
        'express': express.id,
        'fintech': fintech.id,
    }
    session.remove()
    return ids


@pytest.fixture(scope='function')
def estimation_payload(catalog):
    """Web App + Payment Gateway in USD on the standard timeline."""
    return {
        'industries': ['Fintech'],
        'softwareType': ['Web App'],
        'techStack': {'frontend': 'React', 'backend': 'Python'},
        'timeline': '3-6 months',
        'timelineMultiplier': 1.0,
        'features': [catalog['payment_gateway']],
        'currency': 'USD',
    }
