import logging

from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from ..extensions import csrf
from ..schemas import ProductCreate, error_payload, field_errors
from ..store import store

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)
csrf.exempt(api_bp)


@api_bp.route("/products", methods=["GET"])
def list_products():
    return jsonify([p.to_dict() for p in store.list()]), 200


@api_bp.route("/products", methods=["POST"])
def create_product():
    try:
        data = ProductCreate.model_validate(request.get_json(silent=True) or {})
    except ValidationError as ex:
        errors = field_errors(ex)
        logger.info("Rejected product payload: %s", errors)
        return jsonify(error_payload(errors)), 422

    product = store.create(name=data.name, price=data.price)
    return jsonify(product.to_dict()), 201
