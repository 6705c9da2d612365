"""Estimation service: resolve a wizard selection, price it and persist the quote."""
import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from estimator.database import is_storable_id
from estimator.exceptions import ValidationError, NotFoundError
from estimator.models import (
    Estimation, EstimationStatus, EstimationSelection, TechStackSelection,
    SoftwareType, Timeline, Feature, Currency,
)
from estimator.services.pricing_service import PriceBreakdown, calculate_breakdown
from estimator.utils.formatters import round_amount
from estimator.utils.parsing import (
    is_valid_email, parse_decimal, parse_id_list, parse_string_list, parse_text,
)

logger = logging.getLogger(__name__)

ESTIMATION_STATUSES = tuple(status.value for status in EstimationStatus)

# Estimation.timeline_multiplier is Numeric(6, 4)
MULTIPLIER_PLACES = 4
MAX_TIMELINE_MULTIPLIER = Decimal('99.9999')


def parse_estimation_request(data: Dict[str, Any]) -> Tuple[EstimationSelection, Dict[str, Optional[str]]]:
    """
    Validate the POST /api/estimations body.

    Returns:
        (selection, contact) where contact holds contact_name/contact_email/contact_company
    """
    software_types = parse_string_list(data.get('softwareType'), 'softwareType')
    if not software_types:
        raise ValidationError('Please select a software type')

    timeline = data.get('timeline')
    if not isinstance(timeline, str) or not timeline.strip():
        raise ValidationError('Please select a valid timeline')

    currency = data.get('currency')
    if not isinstance(currency, str) or not currency.strip():
        raise ValidationError('Please select a currency')

    multiplier = data.get('timelineMultiplier')
    if multiplier is not None:
        multiplier = parse_decimal(multiplier, 'timelineMultiplier', min_value=0, exclusive_min=True,
                                   max_value=MAX_TIMELINE_MULTIPLIER)
        # Price with exactly the value the row can store
        multiplier = round_amount(multiplier, MULTIPLIER_PLACES)
        if not multiplier:
            raise ValidationError('timelineMultiplier must be greater than 0')

    tech_stack = data.get('techStack')
    if tech_stack is not None and not isinstance(tech_stack, dict):
        raise ValidationError('techStack must be an object')

    selection = EstimationSelection(
        software_types=software_types,
        timeline=timeline.strip(),
        currency=currency.strip().upper(),
        industries=parse_string_list(data.get('industries'), 'industries'),
        tech_stack=TechStackSelection.from_payload(tech_stack),
        feature_ids=parse_id_list(data.get('features'), 'features'),
        timeline_multiplier=multiplier,
    )

    contact_email = parse_text(data.get('contactEmail'), 'contactEmail', max_length=255, required=False)
    if contact_email and not is_valid_email(contact_email):
        raise ValidationError('Valid email is required')

    contact = {
        'contact_name': parse_text(data.get('contactName'), 'contactName', max_length=255, required=False),
        'contact_email': contact_email,
        'contact_company': parse_text(data.get('contactCompany'), 'contactCompany', max_length=255, required=False),
    }
    return selection, contact


def _resolve_currency(session: Session, code: str) -> Currency:
    currency = session.query(Currency).filter(
        Currency.code == code.upper(),
        Currency.is_active == True
    ).first()
    if not currency:
        raise ValidationError('Invalid currency')
    return currency


def _resolve_software_types(session: Session, names: List[str]) -> List[SoftwareType]:
    rows = session.query(SoftwareType).filter(
        SoftwareType.name.in_(names),
        SoftwareType.is_active == True
    ).all()
    by_name = {row.name: row for row in rows}
    if any(name not in by_name for name in names):
        raise ValidationError('One or more invalid software types')
    return [by_name[name] for name in names]


def _resolve_timeline(session: Session, label: str) -> Timeline:
    timeline = session.query(Timeline).filter(
        Timeline.label == label,
        Timeline.is_active == True
    ).first()
    if not timeline:
        raise ValidationError('Invalid timeline')
    return timeline


def _resolve_features(session: Session, feature_ids: List[int]) -> List[Feature]:
    """Active features among the requested ids; unknown ids are dropped."""
    candidates = [fid for fid in feature_ids if is_storable_id(fid)]
    if not candidates:
        if feature_ids:
            logger.info(f"[ESTIMATION] Ignoring unknown feature ids: {feature_ids}")
        return []
    rows = session.query(Feature).filter(
        Feature.id.in_(candidates),
        Feature.is_active == True
    ).all()
    by_id = {row.id: row for row in rows}
    dropped = [fid for fid in feature_ids if fid not in by_id]
    if dropped:
        logger.info(f"[ESTIMATION] Ignoring unknown or inactive feature ids: {dropped}")
    return [by_id[fid] for fid in feature_ids if fid in by_id]


def price_selection(session: Session, selection: EstimationSelection,
                    trust_client_multiplier: bool = True) -> PriceBreakdown:
    """
    Resolve every reference in the selection and compute the breakdown.

    Raises:
        ValidationError: unknown software type, timeline or currency
    """
    currency = _resolve_currency(session, selection.currency)
    software_types = _resolve_software_types(session, selection.software_types)
    timeline = _resolve_timeline(session, selection.timeline)
    features = _resolve_features(session, selection.feature_ids)

    if trust_client_multiplier and selection.timeline_multiplier is not None:
        multiplier = selection.timeline_multiplier
    else:
        multiplier = timeline.multiplier

    return calculate_breakdown(software_types, features, currency, multiplier)


def create_estimation(session: Session, selection: EstimationSelection,
                      contact: Optional[Dict[str, Optional[str]]] = None,
                      trust_client_multiplier: bool = True) -> Tuple[Estimation, PriceBreakdown]:
    """
    Price a selection and store it as an Estimation.

    All lookups happen before the single insert, so a validation failure
    leaves no row behind.
    """
    contact = contact or {}
    try:
        breakdown = price_selection(session, selection, trust_client_multiplier)

        estimation = Estimation(
            **selection.to_columns(),
            timeline_multiplier=breakdown.timeline_multiplier,
            exchange_rate=breakdown.exchange_rate,
            base_price=breakdown.base_price,
            features_price=breakdown.features_price,
            total_price=breakdown.total_price,
            line_items=breakdown.line_items(),
            contact_name=contact.get('contact_name'),
            contact_email=contact.get('contact_email'),
            contact_company=contact.get('contact_company'),
            status=(EstimationStatus.SENT if contact.get('contact_email') else EstimationStatus.DRAFT).value,
        )
        session.add(estimation)
        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info(
        f"[ESTIMATION] Created #{estimation.id}: {breakdown.currency_code} "
        f"total={breakdown.display_total_price} status={estimation.status}"
    )
    return estimation, breakdown


def list_estimations(session: Session, status: Optional[str] = None) -> List[Estimation]:
    """All estimations, newest first."""
    query = session.query(Estimation)
    if status:
        if status not in ESTIMATION_STATUSES:
            raise ValidationError(f"status must be one of: {', '.join(ESTIMATION_STATUSES)}")
        query = query.filter(Estimation.status == status)
    return query.order_by(Estimation.created_at.desc(), Estimation.id.desc()).all()


def get_estimation(session: Session, estimation_id: int) -> Estimation:
    estimation = session.get(Estimation, estimation_id) if is_storable_id(estimation_id) else None
    if not estimation:
        raise NotFoundError('Estimation not found')
    return estimation


def update_estimation_status(session: Session, estimation_id: int, status: Any) -> Estimation:
    """Change the lifecycle status. Prices are never touched."""
    if status not in ESTIMATION_STATUSES:
        raise ValidationError(f"status must be one of: {', '.join(ESTIMATION_STATUSES)}")

    estimation = get_estimation(session, estimation_id)
    try:
        previous = estimation.status
        estimation.status = status
        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info(f"[ESTIMATION] #{estimation_id} status {previous} -> {status}")
    return estimation


def delete_estimation(session: Session, estimation_id: int) -> None:
    estimation = get_estimation(session, estimation_id)
    try:
        session.delete(estimation)
        session.commit()
    except Exception:
        session.rollback()
        raise
    logger.info(f"[ESTIMATION] Deleted #{estimation_id}")
