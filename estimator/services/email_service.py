"""
Email notifications for contact requests and estimations.
Uses Flask-Mail for SMTP delivery. A failed or disabled send never breaks the request.
"""
import logging
from flask import current_app
from flask_mail import Mail, Message

from estimator.utils.formatters import money

logger = logging.getLogger(__name__)

mail = Mail()


def init_mail(app):
    """Initialize Flask-Mail with app."""
    mail.init_app(app)


def _mail_enabled() -> bool:
    """
    Check if mail is properly configured and enabled.
    Prevents 500 errors in dev or misconfigured environments.
    """
    cfg = current_app.config
    return bool(
        not cfg.get("MAIL_SUPPRESS_SEND", False)
        and cfg.get("MAIL_SERVER")
        and cfg.get("MAIL_USERNAME")
    )


def send_email(to: str, subject: str, body: str) -> bool:
    """
    Send a plain-text email.

    Returns:
        True if sent (or intentionally skipped), False on delivery failure
    """
    if not to:
        logger.warning(f"[EMAIL] No recipient for '{subject}', skipped")
        return False

    if not _mail_enabled():
        logger.info(f"[MAIL DISABLED] Email '{subject}' skipped for {to}")
        return True

    try:
        msg = Message(subject=subject, recipients=[to], body=body)
        mail.send(msg)
        logger.info(f"[EMAIL] Email sent to {to}")
        return True
    except Exception as e:
        logger.exception(f"[EMAIL] Failed to send email to {to}: {e}")
        return False


def send_contact_notification(contact) -> bool:
    """Notify the admin inbox about a new contact request."""
    admin_email = current_app.config.get('ADMIN_NOTIFICATION_EMAIL')
    lines = [
        f"New contact request #{contact.id}",
        "",
        f"Name: {contact.name}",
        f"Email: {contact.email}",
        f"Company: {contact.company or '-'}",
        f"Project type: {contact.project_type or '-'}",
        "",
        contact.message,
    ]
    return send_email(admin_email, f"New contact request from {contact.name}", "\n".join(lines))


def send_estimation_summary(estimation, breakdown) -> bool:
    """Send the visitor a copy of the quote they requested."""
    symbol = breakdown.currency_symbol
    lines = [
        f"Hi {estimation.contact_name or 'there'},",
        "",
        "Here is the estimate you requested:",
        "",
        f"Software: {', '.join(estimation.software_types)}",
        f"Timeline: {estimation.timeline}",
        f"Base price: {money(breakdown.display_base_price, symbol)}",
        f"Features: {money(breakdown.display_features_price, symbol)}",
        f"Total: {money(breakdown.display_total_price, symbol)} ({breakdown.currency_code})",
        "",
        "We will get back to you shortly.",
    ]
    return send_email(estimation.contact_email, f"Your project estimate #{estimation.id}", "\n".join(lines))
