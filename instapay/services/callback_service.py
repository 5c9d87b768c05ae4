"""
Callback Service
Routes inbound gateway callbacks to the token, outward status update and
inward transaction flows and shapes each flow's response envelope
"""

import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional

from instapay.constants import (
    CALLBACK_ENDPOINTS,
    CallbackFlow,
    ReasonCode,
    ResponseCode,
    TOKEN_TTL,
)
from instapay.errors import ConfigurationError, UnknownEndpointError
from instapay.models import (
    Accepted,
    CallbackResponse,
    Error,
    InwardResult,
    Rejected,
    TokenIssued,
)
from instapay.services.field_normalizer import extract_instruction_id
from instapay.services.inward_transaction_service import InwardTransactionHandler
from instapay.services.token_service import TokenService
from instapay.utils.logger import get_logger

logger = get_logger(__name__)


# Outward status updates only look at these keys
SERVICE_RESPONSE_INSTRUCTION_ID_PATHS = (
    ('instruction_id',),
    ('InstructionId',),
    ('data', 'instruction_id'),
)

ServiceResponseHandler = Callable[[Mapping[str, Any]], Any]
ServiceRequestHandler = Callable[[Mapping[str, Any]], Any]


@dataclass(frozen=True)
class CallbackConfig:
    """
    Dispatcher configuration, fixed for the lifetime of the dispatcher

    Attributes:
        secret_key: Shared secret for HS256 token signing
        token_ttl: Validity of issued tokens in seconds
        inward_handler: Validation chain for inward transactions
        service_request_handler: Fallback for inward transactions when no
            inward_handler is configured
        service_response_handler: Receives outward transaction status updates
    """
    secret_key: Optional[str]
    token_ttl: int = TOKEN_TTL
    inward_handler: Optional[InwardTransactionHandler] = None
    service_request_handler: Optional[ServiceRequestHandler] = None
    service_response_handler: Optional[ServiceResponseHandler] = None


def _as_mapping(result: Any) -> Mapping[str, Any]:
    if isinstance(result, InwardResult):
        return result.to_dict()
    if isinstance(result, Mapping):
        return result
    return {}


class CallbackDispatcher:
    """Stateless dispatcher for gateway callbacks"""

    def __init__(self, config: CallbackConfig):
        self.config = config
        self.token_service = TokenService(config.secret_key)

        self._flows = {
            CallbackFlow.GET_TOKEN: self.get_token,
            CallbackFlow.SERVICE_RESPONSE: self.service_response,
            CallbackFlow.SERVICE_REQUEST: self.service_request,
        }

    def process_callback(self, endpoint: str, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Route a callback to its flow and return the response envelope

        Args:
            endpoint: Callback path or its short alias (exact match)
            payload: Decoded request body

        Returns:
            Response envelope for the gateway

        Raises:
            UnknownEndpointError: If the endpoint is not a callback endpoint
            ConfigurationError: If the flow's collaborator is not configured
        """
        flow = CALLBACK_ENDPOINTS.get(endpoint)
        if flow is None:
            raise UnknownEndpointError(endpoint)

        logger.info(f'Received {flow.value} callback on {endpoint}')
        return self._flows[flow](payload).to_envelope()

    def handle_get_token(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return self.get_token(payload).to_envelope()

    def handle_service_response(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return self.service_response(payload).to_envelope()

    def handle_service_request(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return self.service_request(payload).to_envelope()

    def verify_token(self, token: str, check_expiry: bool = False) -> bool:
        return self.token_service.verify(token, check_expiry=check_expiry)

    def get_token(self, payload: Mapping[str, Any]) -> CallbackResponse:
        identity = payload.get('partner_uuid')
        if identity is None:
            identity = str(uuid.uuid4())
        token, expiry = self.token_service.issue(str(identity), ttl=self.config.token_ttl)
        return TokenIssued(token=token, expiry=expiry)

    def service_response(self, payload: Mapping[str, Any]) -> CallbackResponse:
        """Outward transaction status update"""
        handler = self.config.service_response_handler
        if handler is None:
            raise ConfigurationError('Service response handler not set')

        instruction_id = extract_instruction_id(payload, SERVICE_RESPONSE_INSTRUCTION_ID_PATHS)
        if not instruction_id:
            logger.warning('Service response callback without instruction_id')
            return Error(ResponseCode.ERROR, 'Missing instruction_id')

        try:
            result = handler(payload)
        except Exception as e:
            logger.error(f'Service response handler failed for {instruction_id}: {str(e)}')
            return Error(ResponseCode.INTERNAL_ERROR, str(e))

        return Accepted(result, code=ResponseCode.OK, status='Success')

    def service_request(self, payload: Mapping[str, Any]) -> CallbackResponse:
        """Inward transaction request"""
        if self.config.inward_handler is not None:
            return self._inward_transaction(payload)

        handler = self.config.service_request_handler
        if handler is None:
            raise ConfigurationError('Service request handler or InwardTransactionHandler must be set')

        try:
            result = handler(payload)
        except Exception as e:
            logger.error(f'Service request handler failed: {str(e)}')
            return Rejected(ReasonCode.DS04, ReasonCode.DS04.description, message=str(e))

        outcome = _as_mapping(result)
        if outcome.get('reject'):
            return Rejected(
                outcome.get('reason_code') or ReasonCode.DS04,
                outcome.get('reason_description') or ReasonCode.DS04.description
            )

        return Accepted(outcome if isinstance(result, InwardResult) else result)

    def _inward_transaction(self, payload: Mapping[str, Any]) -> CallbackResponse:
        try:
            result = self.config.inward_handler.process_transaction(payload)
        except Exception as e:
            logger.error(f'Inward transaction handling failed: {str(e)}')
            return Rejected(ReasonCode.DS04, ReasonCode.DS04.description, message=str(e))

        if result.reject:
            return Rejected(
                result.reason_code or ReasonCode.DS04,
                result.reason_description or ReasonCode.DS04.description,
                message=result.message
            )

        return Accepted(result.data if result.data is not None else {})
