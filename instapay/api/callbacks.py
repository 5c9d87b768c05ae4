"""
Callback API Endpoints
Receives the gateway's GetToken, service-responses and service-requests calls
"""

from flask import Blueprint, current_app, jsonify, request

from instapay.constants import (
    GET_TOKEN_PATH,
    ResponseCode,
    SERVICE_REQUESTS_PATH,
    SERVICE_RESPONSES_PATH,
)
from instapay.errors import InstapayError
from instapay.utils.authorization import callback_token_required
from instapay.utils.logger import get_logger

callbacks_bp = Blueprint('callbacks', __name__)
logger = get_logger(__name__)


def _dispatch(endpoint):
    payload = request.get_json(silent=True)

    if not isinstance(payload, dict):
        logger.error(f'Invalid JSON payload on {endpoint}')
        return jsonify({
            'code': ResponseCode.ERROR.value,
            'status': 'Bad Request',
            'message': 'Invalid JSON',
        }), 400

    try:
        response = current_app.extensions['instapay'].process_callback(endpoint, payload)
    except InstapayError as e:
        logger.error(f'Callback error on {endpoint}: {e.message}')
        return jsonify({
            'code': ResponseCode.INTERNAL_ERROR.value,
            'status': 'Error',
            'message': e.message,
        }), 500

    return jsonify(response), 200


@callbacks_bp.route(GET_TOKEN_PATH, methods=['POST'])
def get_token():
    """
    Authentication handshake, called by the gateway before any other callback

    Body:
        partner_uuid: Optional identity to embed in the token
    """
    return _dispatch(GET_TOKEN_PATH)


@callbacks_bp.route(SERVICE_RESPONSES_PATH, methods=['POST'])
@callback_token_required()
def service_responses():
    """Status update for an outward transaction"""
    return _dispatch(SERVICE_RESPONSES_PATH)


@callbacks_bp.route(SERVICE_REQUESTS_PATH, methods=['POST'])
@callback_token_required()
def service_requests():
    """Inward transaction request; answered with ACTC or RJCT"""
    return _dispatch(SERVICE_REQUESTS_PATH)
