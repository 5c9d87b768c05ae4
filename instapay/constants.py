"""
Instapay Constants
Reason codes, status codes and callback endpoints used by the RBG gateway
"""

from enum import Enum


# Gateway codes
GATEWAY_CODE_UAT = 'INSTAPAYISOUAT'
GATEWAY_CODE_PRODUCTION = 'INSTAPAYISOPROD'

# Only settlement currency supported by the gateway
CURRENCY_PHP = 'PHP'

# Default validity of a callback token in seconds
TOKEN_TTL = 3600


class ReasonCode(str, Enum):
    AC01 = 'AC01'
    AC03 = 'AC03'
    AC04 = 'AC04'
    AM02 = 'AM02'
    AM04 = 'AM04'
    AM09 = 'AM09'
    AM11 = 'AM11'
    AM12 = 'AM12'
    DU03 = 'DU03'
    DS04 = 'DS04'

    @property
    def description(self) -> str:
        return REASON_DESCRIPTIONS[self]


REASON_DESCRIPTIONS = {
    ReasonCode.AC01: 'IncorrectAccountNumber',
    ReasonCode.AC03: 'InvalidCreditorAccountNumber',
    ReasonCode.AC04: 'ClosedAccountNumber',
    ReasonCode.AM02: 'NotAllowedAmount',
    ReasonCode.AM04: 'InsufficientFunds',
    ReasonCode.AM09: 'WrongAmount',
    ReasonCode.AM11: 'InvalidTransactionCurrency',
    ReasonCode.AM12: 'InvalidAmount',
    ReasonCode.DU03: 'DuplicateTransaction',
    ReasonCode.DS04: 'OrderRejected',
}


class TransactionStatus(str, Enum):
    ACCEPTED = 'Accepted'
    ACTC = 'ACTC'
    RJCT = 'RJCT'


class AccountType(str, Enum):
    SAVINGS = 'SA'
    CURRENT = 'CA'


class ResponseCode(str, Enum):
    OK = '200'
    SUCCESS = '201'
    ERROR = '400'
    UNAUTHORIZED = '401'
    NOT_FOUND = '404'
    METHOD_NOT_ALLOWED = '405'
    INTERNAL_ERROR = '500'


class CallbackFlow(str, Enum):
    GET_TOKEN = 'get_token'
    SERVICE_RESPONSE = 'service_response'
    SERVICE_REQUEST = 'service_request'


CALLBACK_BASE_PATH = '/ips-payments'

GET_TOKEN_PATH = f'{CALLBACK_BASE_PATH}/service-responses/GetToken'
SERVICE_RESPONSES_PATH = f'{CALLBACK_BASE_PATH}/service-responses'
SERVICE_REQUESTS_PATH = f'{CALLBACK_BASE_PATH}/service-requests'

# Endpoint routing table: exact, case-sensitive match only
CALLBACK_ENDPOINTS = {
    GET_TOKEN_PATH: CallbackFlow.GET_TOKEN,
    'GetToken': CallbackFlow.GET_TOKEN,
    SERVICE_RESPONSES_PATH: CallbackFlow.SERVICE_RESPONSE,
    'service-responses': CallbackFlow.SERVICE_RESPONSE,
    SERVICE_REQUESTS_PATH: CallbackFlow.SERVICE_REQUEST,
    'service-requests': CallbackFlow.SERVICE_REQUEST,
}
