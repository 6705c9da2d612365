"""
Catalog blueprints: CRUD endpoints for the pricing entities.

Every entity gets the same five routes:
    GET    /api/<resource>          list (optional ?active=true|false)
    GET    /api/<resource>/<id>     read
    POST   /api/<resource>          create
    PUT    /api/<resource>/<id>     partial update
    DELETE /api/<resource>/<id>     delete
"""
from flask import Blueprint, g, request

from estimator.database import get_session
from estimator.middleware import require_json
from estimator.services import catalog_service
from estimator.services.catalog_service import CatalogEntity
from estimator.utils.parsing import parse_bool
from estimator.utils.responses import success_response, list_response


def make_catalog_blueprint(name: str, resource: str, entity: CatalogEntity) -> Blueprint:
    """Build the CRUD blueprint for one catalog entity."""
    bp = Blueprint(name, __name__, url_prefix=f'/api/{resource}')

    @bp.route('', methods=['GET'])
    @bp.route('/', methods=['GET'])
    def list_items():
        active = request.args.get('active')
        active = parse_bool(active, 'active') if active not in (None, '') else None
        items = catalog_service.list_items(get_session(), entity, active)
        return list_response(item.to_dict() for item in items)

    @bp.route('/<int:item_id>', methods=['GET'])
    def get_item(item_id):
        return success_response(catalog_service.get_item(get_session(), entity, item_id).to_dict())

    @bp.route('', methods=['POST'])
    @bp.route('/', methods=['POST'])
    @require_json
    def create_item():
        item = catalog_service.create_item(get_session(), entity, g.payload)
        return success_response(item.to_dict(), 201)

    @bp.route('/<int:item_id>', methods=['PUT'])
    @require_json
    def update_item(item_id):
        item = catalog_service.update_item(get_session(), entity, item_id, g.payload)
        return success_response(item.to_dict())

    @bp.route('/<int:item_id>', methods=['DELETE'])
    def delete_item(item_id):
        catalog_service.delete_item(get_session(), entity, item_id)
        return success_response({})

    return bp


industries_bp = make_catalog_blueprint('industries', 'industries', catalog_service.INDUSTRIES)
software_types_bp = make_catalog_blueprint('software_types', 'software-types', catalog_service.SOFTWARE_TYPES)
tech_stacks_bp = make_catalog_blueprint('tech_stacks', 'tech-stacks', catalog_service.TECH_STACKS)
timelines_bp = make_catalog_blueprint('timelines', 'timelines', catalog_service.TIMELINES)
features_bp = make_catalog_blueprint('features', 'features', catalog_service.FEATURES)
currencies_bp = make_catalog_blueprint('currencies', 'currencies', catalog_service.CURRENCIES)

CATALOG_BLUEPRINTS = (
    industries_bp,
    software_types_bp,
    tech_stacks_bp,
    timelines_bp,
    features_bp,
    currencies_bp,
)
