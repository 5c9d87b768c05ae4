import os
from instapay import create_app
from instapay.extensions import redis_client
from instapay.services import InwardTransactionHandler, RedisDuplicateChecker
from instapay.utils.logger import get_logger

logger = get_logger('instapay.app')


def log_status_update(payload):
    logger.info(f'Outward status update: {payload.get("instruction_id")} -> {payload.get("status")}')
    return {
        'instruction_id': payload.get('instruction_id'),
        'status': 'processed',
    }


app = create_app(
    os.getenv('FLASK_ENV', 'development'),
    inward_handler=InwardTransactionHandler(
        duplicate_checker=RedisDuplicateChecker(
            redis_client,
            ttl=int(os.getenv('DUPLICATE_CHECK_TTL', RedisDuplicateChecker.DEFAULT_TTL))
        )
    ),
    service_response_handler=log_status_update,
)

if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=5000)
