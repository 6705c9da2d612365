"""Aggregated catalog payload rendered by the estimation wizard."""
import logging
from typing import Any, Dict, List

from flask import current_app
from sqlalchemy.orm import Session

from estimator.models import Industry, SoftwareType, TechStack, Timeline, Feature, Currency
from estimator.services.cache_service import get_cache
from estimator.utils.formatters import to_number

logger = logging.getLogger(__name__)

CACHE_MODULE = 'reference'
CACHE_KEY = 'data-for-estimation'


def _group_by_category(items: List[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """Group already-sorted items by their 'category' key, keeping order."""
    grouped: Dict[str, List[Dict[str, Any]]] = {}
    for item in items:
        category = item.pop('category')
        grouped.setdefault(category, []).append(item)
    return grouped


def build_reference_data(session: Session) -> Dict[str, Any]:
    """Read every active catalog row and shape it for the wizard."""
    industries = session.query(Industry).filter(Industry.is_active == True).order_by(Industry.name).all()
    software_types = session.query(SoftwareType).filter(SoftwareType.is_active == True).order_by(SoftwareType.name).all()
    tech_stacks = session.query(TechStack).filter(TechStack.is_active == True).order_by(TechStack.category, TechStack.name).all()
    timelines = session.query(Timeline).filter(Timeline.is_active == True).order_by(Timeline.duration_in_months).all()
    features = session.query(Feature).filter(Feature.is_active == True).order_by(Feature.category, Feature.name).all()
    currencies = session.query(Currency).filter(Currency.is_active == True).order_by(Currency.code).all()

    return {
        'industries': [
            {'id': i.id, 'name': i.name, 'slug': i.slug, 'description': i.description}
            for i in industries
        ],
        'softwareTypes': [
            {
                'id': st.id,
                'name': st.name,
                'category': st.category,
                'basePrice': to_number(st.base_price, 0),
                'complexity': st.complexity,
                'description': st.description,
            }
            for st in software_types
        ],
        'techStacks': _group_by_category([
            {
                'id': t.id,
                'name': t.name,
                'category': t.category,
                'difficultyLevel': t.difficulty_level,
                'hourlyRateMultiplier': to_number(t.hourly_rate_multiplier, 1.0),
                'description': t.description,
            }
            for t in tech_stacks
        ]),
        'timelines': [
            {
                'id': t.id,
                'label': t.label,
                'durationInMonths': t.duration_in_months,
                'multiplier': to_number(t.multiplier, 1.0),
                'description': t.description,
            }
            for t in timelines
        ],
        'features': _group_by_category([
            {
                'id': f.id,
                'name': f.name,
                'category': f.category,
                'estimatedHours': f.estimated_hours,
                'complexity': f.complexity,
                'basePrice': to_number(f.base_price, 0),
                'description': f.description,
            }
            for f in features
        ]),
        'currencies': [
            {
                'id': c.id,
                'code': c.code,
                'name': c.name,
                'symbol': c.symbol,
                'flag': c.flag,
                'exchangeRate': to_number(c.exchange_rate, 1.0),
            }
            for c in currencies
        ],
    }


def get_reference_data(session: Session) -> Dict[str, Any]:
    """Cached reference data (cache-aside)."""
    ttl = current_app.config.get('CACHE_REFERENCE_TTL', 300)
    return get_cache().memoize(CACHE_MODULE, CACHE_KEY, lambda: build_reference_data(session), ttl=ttl)


def invalidate_reference_data() -> None:
    """Drop the cached payload after any catalog write."""
    get_cache().delete(CACHE_MODULE, CACHE_KEY)
