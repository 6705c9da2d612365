"""Contact request service."""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from estimator.database import is_storable_id
from estimator.exceptions import ValidationError, NotFoundError
from estimator.models import Contact, ContactStatus
from estimator.services.email_service import send_contact_notification
from estimator.utils.parsing import is_valid_email, parse_text

logger = logging.getLogger(__name__)

CONTACT_STATUSES = tuple(status.value for status in ContactStatus)


def _check_status(status: Any) -> str:
    if status not in CONTACT_STATUSES:
        raise ValidationError(f"status must be one of: {', '.join(CONTACT_STATUSES)}")
    return status


def create_contact(session: Session, data: Dict[str, Any]) -> Contact:
    """
    Store a contact request and notify the admin inbox.

    Raises:
        ValidationError: name, valid email and message are required
    """
    name = parse_text(data.get('name'), 'Name', max_length=255, required=False)
    if not name:
        raise ValidationError('Name is required')

    email = data.get('email')
    if not isinstance(email, str) or not is_valid_email(email):
        raise ValidationError('Valid email is required')

    message = parse_text(data.get('message'), 'Message', required=False)
    if not message:
        raise ValidationError('Message is required')

    try:
        contact = Contact(
            name=name,
            email=email.strip(),
            company=parse_text(data.get('company'), 'company', max_length=255, required=False),
            project_type=parse_text(data.get('projectType'), 'projectType', max_length=255, required=False),
            message=message,
            status=ContactStatus.NEW.value,
        )
        session.add(contact)
        session.commit()
    except Exception:
        session.rollback()
        raise

    logger.info(f"[CONTACT] New contact #{contact.id} from {contact.email}")
    send_contact_notification(contact)
    return contact


def list_contacts(session: Session, status: Optional[str] = None) -> List[Contact]:
    """All contacts, newest first."""
    query = session.query(Contact)
    if status:
        query = query.filter(Contact.status == _check_status(status))
    return query.order_by(Contact.created_at.desc(), Contact.id.desc()).all()


def get_contact(session: Session, contact_id: int) -> Contact:
    contact = session.get(Contact, contact_id) if is_storable_id(contact_id) else None
    if not contact:
        raise NotFoundError('Contact not found')
    return contact


def update_contact_status(session: Session, contact_id: int, status: Any) -> Contact:
    """Move a contact through new -> in-progress -> responded -> closed."""
    _check_status(status)
    contact = get_contact(session, contact_id)
    try:
        contact.status = status
        # First response is stamped once
        if status == ContactStatus.RESPONDED.value and not contact.responded_at:
            contact.responded_at = datetime.now(timezone.utc)
        session.commit()
    except Exception:
        session.rollback()
        raise
    return contact


def delete_contact(session: Session, contact_id: int) -> None:
    contact = get_contact(session, contact_id)
    try:
        session.delete(contact)
        session.commit()
    except Exception:
        session.rollback()
        raise
    logger.info(f"[CONTACT] Deleted #{contact_id}")
