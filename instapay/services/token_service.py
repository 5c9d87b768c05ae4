"""
Token Service
Issues and verifies the HS256 tokens used in the gateway's GetToken handshake
"""

import time
import uuid
from typing import Any, Dict, Optional, Tuple

import jwt
from jwt import PyJWTError

from instapay.constants import TOKEN_TTL
from instapay.errors import ConfigurationError


ALGORITHM = 'HS256'


class TokenService:
    """Signs and verifies callback tokens with a shared secret key"""

    def __init__(self, secret_key: Optional[str]):
        self.secret_key = secret_key

    def _require_key(self) -> str:
        if not self.secret_key:
            raise ConfigurationError('A secret key is required for token signing')
        return self.secret_key

    def issue(self, identity: str, ttl: int = TOKEN_TTL) -> Tuple[str, int]:
        """
        Issue a signed token

        Args:
            identity: Subject the token is issued to
            ttl: Validity window in seconds

        Returns:
            Tuple of (token, expiry timestamp)

        Raises:
            ConfigurationError: If no secret key is configured
        """
        secret_key = self._require_key()
        now = int(time.time())
        expiry = now + ttl

        # Access-token claim set, identity carried under 'identity'
        claims = {
            'iat': now,
            'nbf': now,
            'exp': expiry,
            'jti': uuid.uuid4().hex,
            'identity': identity,
            'fresh': False,
            'type': 'access',
        }

        return jwt.encode(claims, secret_key, algorithm=ALGORITHM), expiry

    def verify(self, token: str, check_expiry: bool = False) -> bool:
        """
        Verify a token's signature

        Time claims are not part of the signature check; pass
        check_expiry=True to also reject expired or not-yet-valid tokens.
        """
        secret_key = self._require_key()
        if not isinstance(token, str):
            return False

        try:
            jwt.decode(
                token,
                secret_key,
                algorithms=[ALGORITHM],
                options={
                    'verify_exp': check_expiry,
                    'verify_nbf': check_expiry,
                    'verify_iat': check_expiry,
                }
            )
        except PyJWTError:
            return False

        return True

    @staticmethod
    def decode_claims(token: str) -> Optional[Dict[str, Any]]:
        """Decode the claims of a token without checking its signature"""
        try:
            return jwt.decode(token, options={'verify_signature': False})
        except PyJWTError:
            return None
