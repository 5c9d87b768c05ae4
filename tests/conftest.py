"""
Pytest Configuration and Fixtures
"""
from unittest.mock import Mock

import fakeredis
import pytest

from instapay import create_app
from instapay.extensions import redis_client as _redis_client
from instapay.services import CallbackConfig, CallbackDispatcher, InwardTransactionHandler


SECRET_KEY = 'test-callback-secret'


@pytest.fixture(scope='function')
def redis_client():
    """
    Fake Redis for tests + patch the app redis client.
    """
    fake_redis = fakeredis.FakeStrictRedis(decode_responses=True)
    _redis_client.client = fake_redis

    yield fake_redis

    fake_redis.flushall()
    _redis_client.client = None


@pytest.fixture(scope='function')
def inward_handler():
    """Inward handler with no collaborators configured"""
    return InwardTransactionHandler()


@pytest.fixture(scope='function')
def status_update_handler():
    handler = Mock()
    handler.return_value = {'status': 'processed'}
    return handler


@pytest.fixture(scope='function')
def dispatcher(inward_handler, status_update_handler):
    return CallbackDispatcher(CallbackConfig(
        secret_key=SECRET_KEY,
        inward_handler=inward_handler,
        service_response_handler=status_update_handler
    ))


@pytest.fixture(scope='function')
def app(inward_handler, status_update_handler):
    """Create application for testing"""
    app = create_app(
        'testing',
        inward_handler=inward_handler,
        service_response_handler=status_update_handler
    )

    ctx = app.app_context()
    ctx.push()

    yield app

    ctx.pop()


@pytest.fixture(scope='function')
def client(app):
    """Create a test client"""
    return app.test_client()


@pytest.fixture(scope='function')
def flat_payload():
    """Inward transaction in the flat custom JSON shape"""
    return {
        'instruction_id': 'I1',
        'amount': 100,
        'currency': 'PHP',
        'creditor_account': {
            'account_number': 'A1',
            'account_type': 'SA',
            'bank_code': 'RBG',
            'account_name': 'Maria Santos',
        },
        'debtor_account': {
            'account_number': 'D1',
            'bank_code': 'OTHERBANK',
            'bank_name': 'Other Bank',
        },
    }


@pytest.fixture(scope='function')
def iso_payload():
    """Inward transaction in the ISO20022-style nested shape"""
    return {
        'GrpHdr': {'MsgId': 'MSG-20261019-0001'},
        'CdtTrfTxInf': {
            'InstdAmt': {'_value': '2500.50', '_Ccy': 'PHP'},
            'CdtrAcct': {
                'Id': {'Othr': {'Id': '001234567890'}},
                'Tp': {'Cd': 'CA'},
                'Nm': 'Juan dela Cruz',
            },
            'DbtrAcct': {
                'Id': {'_Id': '009876543210'},
                'Tp': {'Cd': 'SA'},
            },
        },
    }


@pytest.fixture(scope='function')
def partner_callback_payload():
    """Inward transaction in the flattened partner-callback shape"""
    return {
        'data': {
            'InstrId': 'RBG-INSTR-42',
            'TtlIntrBkSttlmAmt': '750.00',
            'CdtrAcctId': 'A2',
            'CdtrNm': 'Juan',
            'DBtrAcctId': 'D2',
            'DbtrNm': 'Pedro',
            'DBtrAgrBICFI': 'BANKPHMM',
        },
    }
