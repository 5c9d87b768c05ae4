from functools import wraps

from flask import current_app, request

from instapay.errors import Unauthorized


def callback_token_required():
    """Require a bearer token issued by the GetToken callback"""

    def decorator(func):
        @wraps(func)
        def decorated_function(*args, **kwargs):
            if not current_app.config.get('CALLBACK_REQUIRE_TOKEN'):
                return func(*args, **kwargs)

            auth_header = request.headers.get('Authorization', '')
            scheme, _, token = auth_header.partition(' ')

            if scheme.lower() != 'bearer' or not token:
                raise Unauthorized("Bearer token missing")

            dispatcher = current_app.extensions['instapay']
            if not dispatcher.verify_token(token.strip(), check_expiry=True):
                raise Unauthorized("Invalid callback token")

            return func(*args, **kwargs)

        return decorated_function

    return decorator
