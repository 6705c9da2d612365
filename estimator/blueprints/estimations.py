"""Estimations blueprint: wizard reference data, quote creation and admin management."""
from flask import Blueprint, current_app, g, request

from estimator.blueprints.metrics import estimations_created_total
from estimator.database import get_session
from estimator.middleware import require_json
from estimator.services import estimation_service
from estimator.services.email_service import send_estimation_summary
from estimator.services.reference_data_service import get_reference_data
from estimator.utils.formatters import to_number
from estimator.utils.responses import success_response, list_response

estimations_bp = Blueprint('estimations', __name__, url_prefix='/api/estimations')


@estimations_bp.route('/data-for-estimation', methods=['GET'])
def data_for_estimation():
    """Every active catalog row the wizard needs, in one payload."""
    return success_response(get_reference_data(get_session()))


@estimations_bp.route('', methods=['POST'])
@estimations_bp.route('/', methods=['POST'])
@require_json
def create_estimation():
    """
    Price the visitor's selection and store it.

    Body: {industries[], softwareType[], techStack{}, timeline, timelineMultiplier,
           features[], currency, contactName?, contactEmail?, contactCompany?}
    """
    session = get_session()
    selection, contact = estimation_service.parse_estimation_request(g.payload)

    estimation, breakdown = estimation_service.create_estimation(
        session,
        selection,
        contact,
        trust_client_multiplier=current_app.config.get('TRUST_CLIENT_TIMELINE_MULTIPLIER', True),
    )
    estimations_created_total.labels(currency=breakdown.currency_code).inc()

    if estimation.contact_email:
        send_estimation_summary(estimation, breakdown)

    return success_response({
        'id': estimation.id,
        'status': estimation.status,
        **breakdown.to_dict(),
        'timeline': {'label': estimation.timeline, 'multiplier': to_number(breakdown.timeline_multiplier)},
        'estimation': estimation.to_dict(),
    }, 201)


@estimations_bp.route('', methods=['GET'])
@estimations_bp.route('/', methods=['GET'])
def list_estimations():
    """All estimations, newest first. Optional ?status= filter."""
    status = request.args.get('status', '').strip() or None
    estimations = estimation_service.list_estimations(get_session(), status)
    return list_response(e.to_dict() for e in estimations)


@estimations_bp.route('/<int:estimation_id>', methods=['GET'])
def get_estimation(estimation_id):
    estimation = estimation_service.get_estimation(get_session(), estimation_id)
    return success_response(estimation.to_dict())


@estimations_bp.route('/<int:estimation_id>', methods=['PUT'])
@require_json
def update_estimation(estimation_id):
    """Admin action: change status only."""
    estimation = estimation_service.update_estimation_status(
        get_session(), estimation_id, g.payload.get('status')
    )
    return success_response(estimation.to_dict())


@estimations_bp.route('/<int:estimation_id>', methods=['DELETE'])
def delete_estimation(estimation_id):
    estimation_service.delete_estimation(get_session(), estimation_id)
    return success_response({})
