"""Contacts blueprint: public contact form and admin follow-up."""
from flask import Blueprint, g, request

from estimator.database import get_session
from estimator.middleware import require_json
from estimator.services import contact_service
from estimator.utils.responses import success_response, list_response

contacts_bp = Blueprint('contacts', __name__, url_prefix='/api/contacts')


@contacts_bp.route('', methods=['POST'])
@contacts_bp.route('/', methods=['POST'])
@require_json
def create_contact():
    contact = contact_service.create_contact(get_session(), g.payload)
    return success_response(contact.to_dict(), 201)


@contacts_bp.route('', methods=['GET'])
@contacts_bp.route('/', methods=['GET'])
def list_contacts():
    status = request.args.get('status', '').strip() or None
    contacts = contact_service.list_contacts(get_session(), status)
    return list_response(c.to_dict() for c in contacts)


@contacts_bp.route('/<int:contact_id>', methods=['GET'])
def get_contact(contact_id):
    return success_response(contact_service.get_contact(get_session(), contact_id).to_dict())


@contacts_bp.route('/<int:contact_id>', methods=['PUT'])
@require_json
def update_contact(contact_id):
    contact = contact_service.update_contact_status(get_session(), contact_id, g.payload.get('status'))
    return success_response(contact.to_dict())


@contacts_bp.route('/<int:contact_id>', methods=['DELETE'])
def delete_contact(contact_id):
    contact_service.delete_contact(get_session(), contact_id)
    return success_response({})
