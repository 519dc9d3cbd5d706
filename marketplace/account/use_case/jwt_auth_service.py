"""Bearer token issuing and verification."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from marketplace.platform.auth.current_user_info import CurrentUserInfo
from marketplace.platform.config.core_setting import settings
from marketplace.platform.exception.exceptions import AuthenticationError


class JwtAuthService:
    def __init__(self, *, secret: str, algorithm: str, expire_minutes: int):
        self.secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def create_token(self, *, user_id: int, email: str, role: str) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(user_id),
            'iat': now,
            'exp': now + timedelta(minutes=self.expire_minutes),
            'id': user_id,
            'email': email,
            'role': role,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError:
            raise AuthenticationError('Invalid or expired token')

    def to_user_info(self, token: str) -> CurrentUserInfo:
        payload = self.decode_token(token)
        try:
            return CurrentUserInfo(
                user_id=int(payload['id']), email=str(payload['email']), role=str(payload['role'])
            )
        except (KeyError, TypeError, ValueError):
            raise AuthenticationError('Invalid or expired token')


jwt_auth_service = JwtAuthService(
    secret=settings.SECRET_KEY.get_secret_value(),
    algorithm=settings.ALGORITHM,
    expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
)
