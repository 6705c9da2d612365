"""
Currency rules on top of the generic catalog CRUD.

At most one currency is the base currency. Setting the flag clears it on
every other row inside the same transaction, so readers never see zero or
two base currencies after a commit.
"""
import logging
from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from estimator.exceptions import ValidationError
from estimator.models import Currency

logger = logging.getLogger(__name__)


def clear_base_currency(session: Session, keep_id: Optional[int] = None) -> int:
    """
    Unset is_base_currency on every row except keep_id.

    Runs inside the caller's transaction; the caller commits.

    Returns:
        Number of rows changed
    """
    query = session.query(Currency).filter(Currency.is_base_currency == True)
    if keep_id is not None:
        query = query.filter(Currency.id != keep_id)
    changed = query.update({Currency.is_base_currency: False}, synchronize_session='fetch')
    if changed:
        logger.info(f"[CURRENCY] Cleared base flag on {changed} currencies")
    return changed


def prepare_currency(session: Session, currency: Currency, values: Dict[str, Any], creating: bool) -> None:
    """Catalog hook: clear-then-set the base flag before the row is written."""
    if not values.get('is_base_currency'):
        return
    if creating or not currency.is_base_currency:
        clear_base_currency(session, keep_id=currency.id)


def check_currency_deletable(session: Session, currency: Currency) -> None:
    """Catalog hook: the base currency cannot be deleted."""
    if currency.is_base_currency:
        raise ValidationError('Cannot delete base currency')
