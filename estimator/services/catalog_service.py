"""
Catalog service: create/read/update/delete for the pricing entities.

Industries, software types, tech stacks, timelines, features and currencies
share one code path driven by a field table per entity. Entity-specific
rules (industry slugs, the base-currency flag) plug in through hooks.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from estimator.database import is_storable_id
from estimator.exceptions import ValidationError, NotFoundError
from estimator.models import (
    Industry, SoftwareType, TechStack, Timeline, Feature, Currency,
    SOFTWARE_CATEGORIES, COMPLEXITY_LEVELS, TECH_STACK_CATEGORIES, DIFFICULTY_LEVELS,
)
from estimator.services.currency_service import prepare_currency, check_currency_deletable
from estimator.services.reference_data_service import invalidate_reference_data
from estimator.utils.parsing import (
    parse_bool, parse_choice, parse_decimal, parse_id_list, parse_int, parse_text, slugify,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldSpec:
    """Maps one camelCase payload key onto a model attribute."""
    key: str
    attr: str
    parse: Callable[[Any], Any]
    required: bool = False
    default: Any = None


@dataclass(frozen=True)
class CatalogEntity:
    model: Any
    label: str
    order_by: Tuple[str, ...]
    fields: Tuple[FieldSpec, ...]
    prepare: Optional[Callable[[Session, Any, Dict[str, Any], bool], None]] = None
    before_delete: Optional[Callable[[Session, Any], None]] = None


def _text(key, min_length=None, max_length=None, required=True):
    return lambda value: parse_text(value, key, min_length, max_length, required)


def _active():
    return FieldSpec('isActive', 'is_active', lambda v: parse_bool(v, 'isActive'), default=True)


def _description():
    return FieldSpec('description', 'description', _text('description', required=False))


def _parse_currency_code(value: Any) -> str:
    code = parse_text(value, 'code', 3, 3)
    if not code.isalpha():
        raise ValidationError('code must be 3 letters')
    return code.upper()


def _prepare_industry(session: Session, industry: Industry, values: Dict[str, Any], creating: bool) -> None:
    """Derive the slug from the name unless one was sent."""
    if values.get('slug'):
        values['slug'] = slugify(values['slug'])
        if not values['slug']:
            raise ValidationError('slug must contain letters or digits')
        return
    values.pop('slug', None)
    name = values.get('name')
    if name and (creating or name != industry.name):
        values['slug'] = slugify(name)
        if not values['slug']:
            raise ValidationError('name must contain letters or digits')


INDUSTRIES = CatalogEntity(
    model=Industry,
    label='Industry',
    order_by=('name',),
    fields=(
        FieldSpec('name', 'name', _text('name', 2, 100), required=True),
        FieldSpec('slug', 'slug', _text('slug', 1, 100, required=False)),
        _description(),
        _active(),
    ),
    prepare=_prepare_industry,
)

SOFTWARE_TYPES = CatalogEntity(
    model=SoftwareType,
    label='Software type',
    order_by=('name',),
    fields=(
        FieldSpec('name', 'name', _text('name', 2, 100), required=True),
        FieldSpec('category', 'category', lambda v: parse_choice(v, 'category', SOFTWARE_CATEGORIES), required=True),
        FieldSpec('basePrice', 'base_price', lambda v: parse_decimal(v, 'basePrice', min_value=0), default=Decimal('0')),
        FieldSpec('complexity', 'complexity', lambda v: parse_choice(v, 'complexity', COMPLEXITY_LEVELS), default='medium'),
        _description(),
        _active(),
    ),
)

TECH_STACKS = CatalogEntity(
    model=TechStack,
    label='Tech stack',
    order_by=('category', 'name'),
    fields=(
        FieldSpec('name', 'name', _text('name', 2, 100), required=True),
        FieldSpec('category', 'category', lambda v: parse_choice(v, 'category', TECH_STACK_CATEGORIES), required=True),
        FieldSpec('version', 'version', _text('version', max_length=50, required=False)),
        _description(),
        FieldSpec('difficultyLevel', 'difficulty_level',
                  lambda v: parse_choice(v, 'difficultyLevel', DIFFICULTY_LEVELS), default='intermediate'),
        FieldSpec('hourlyRateMultiplier', 'hourly_rate_multiplier',
                  lambda v: parse_decimal(v, 'hourlyRateMultiplier', min_value=Decimal('0.1'), max_value=Decimal('5.0')),
                  default=Decimal('1.0')),
        _active(),
    ),
)

TIMELINES = CatalogEntity(
    model=Timeline,
    label='Timeline',
    order_by=('duration_in_months',),
    fields=(
        FieldSpec('label', 'label', _text('label', 3, 50), required=True),
        FieldSpec('durationInMonths', 'duration_in_months',
                  lambda v: parse_int(v, 'durationInMonths', 1, 60), required=True),
        FieldSpec('multiplier', 'multiplier',
                  lambda v: parse_decimal(v, 'multiplier', min_value=Decimal('0.1'), max_value=Decimal('3.0')),
                  default=Decimal('1.0')),
        _description(),
        _active(),
    ),
)

FEATURES = CatalogEntity(
    model=Feature,
    label='Feature',
    order_by=('category', 'name'),
    fields=(
        FieldSpec('name', 'name', _text('name', 2, 100), required=True),
        FieldSpec('category', 'category', _text('category', 1, 50), required=True),
        FieldSpec('estimatedHours', 'estimated_hours',
                  lambda v: parse_int(v, 'estimatedHours', 1, 1000), required=True),
        FieldSpec('basePrice', 'base_price', lambda v: parse_decimal(v, 'basePrice', min_value=0), default=Decimal('0')),
        FieldSpec('complexity', 'complexity', lambda v: parse_choice(v, 'complexity', COMPLEXITY_LEVELS), default='medium'),
        _description(),
        FieldSpec('prerequisites', 'prerequisites', lambda v: parse_id_list(v, 'prerequisites')),
        _active(),
    ),
)

CURRENCIES = CatalogEntity(
    model=Currency,
    label='Currency',
    order_by=('code',),
    fields=(
        FieldSpec('code', 'code', _parse_currency_code, required=True),
        FieldSpec('name', 'name', _text('name', 2, 100), required=True),
        FieldSpec('symbol', 'symbol', _text('symbol', 1, 10), required=True),
        FieldSpec('flag', 'flag', _text('flag', max_length=10, required=False)),
        FieldSpec('exchangeRate', 'exchange_rate',
                  lambda v: parse_decimal(v, 'exchangeRate', min_value=0, exclusive_min=True), default=Decimal('1.0')),
        FieldSpec('isBaseCurrency', 'is_base_currency', lambda v: parse_bool(v, 'isBaseCurrency'), default=False),
        _active(),
    ),
    prepare=prepare_currency,
    before_delete=check_currency_deletable,
)


def parse_payload(entity: CatalogEntity, data: Dict[str, Any], partial: bool = False) -> Dict[str, Any]:
    """
    Turn a request body into model attribute values.

    On create (partial=False) required keys must be present and defaults
    fill the gaps. On update only the keys present are parsed.
    """
    values = {}
    for field_spec in entity.fields:
        if field_spec.key in data:
            if data[field_spec.key] is None and field_spec.required:
                raise ValidationError(f'{field_spec.key} is required')
            values[field_spec.attr] = field_spec.parse(data[field_spec.key]) if data[field_spec.key] is not None else None
        elif not partial:
            if field_spec.required:
                raise ValidationError(f'{field_spec.key} is required')
            if field_spec.default is not None:
                values[field_spec.attr] = field_spec.default

    # Non-nullable columns with defaults cannot be cleared with null
    for field_spec in entity.fields:
        if field_spec.default is not None and field_spec.attr in values and values[field_spec.attr] is None:
            values[field_spec.attr] = field_spec.default
    return values


def list_items(session: Session, entity: CatalogEntity, active: Optional[bool] = None) -> List[Any]:
    model = entity.model
    query = session.query(model)
    if active is not None:
        query = query.filter(model.is_active == active)
    return query.order_by(*[getattr(model, column) for column in entity.order_by]).all()


def get_item(session: Session, entity: CatalogEntity, item_id: int, for_update: bool = False) -> Any:
    if not is_storable_id(item_id):
        raise NotFoundError(f'{entity.label} not found')
    query = session.query(entity.model).filter(entity.model.id == item_id)
    if for_update:
        query = query.with_for_update()
    item = query.first()
    if not item:
        raise NotFoundError(f'{entity.label} not found')
    return item


def _commit(session: Session, entity: CatalogEntity) -> None:
    try:
        session.commit()
    except IntegrityError as e:
        session.rollback()
        logger.warning(f"[CATALOG] Integrity error on {entity.label}: {e.orig}")
        raise ValidationError(f'{entity.label} already exists')
    invalidate_reference_data()


def create_item(session: Session, entity: CatalogEntity, data: Dict[str, Any]) -> Any:
    values = parse_payload(entity, data)
    item = entity.model()
    try:
        if entity.prepare:
            entity.prepare(session, item, values, True)
        for attr, value in values.items():
            setattr(item, attr, value)
        session.add(item)
    except Exception:
        session.rollback()
        raise
    _commit(session, entity)
    logger.info(f"[CATALOG] Created {entity.label} #{item.id}")
    return item


def update_item(session: Session, entity: CatalogEntity, item_id: int, data: Dict[str, Any]) -> Any:
    item = get_item(session, entity, item_id, for_update=True)
    try:
        values = parse_payload(entity, data, partial=True)
        if entity.prepare:
            entity.prepare(session, item, values, False)
        for attr, value in values.items():
            setattr(item, attr, value)
    except Exception:
        session.rollback()
        raise
    _commit(session, entity)
    logger.info(f"[CATALOG] Updated {entity.label} #{item_id}: {sorted(values)}")
    return item


def delete_item(session: Session, entity: CatalogEntity, item_id: int) -> None:
    item = get_item(session, entity, item_id)
    try:
        if entity.before_delete:
            entity.before_delete(session, item)
        session.delete(item)
    except Exception:
        session.rollback()
        raise
    _commit(session, entity)
    logger.info(f"[CATALOG] Deleted {entity.label} #{item_id}")
