"""
Principal extraction from JWTs issued by the authentication service.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from eventhub.platform.config.core_setting import settings
from eventhub.platform.exception.exceptions import AuthenticationError
from eventhub.service.ticketing.domain.entity.user_entity import UserEntity
from eventhub.service.ticketing.domain.enum.user_role import UserRole


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_days = 7

    def create_jwt_token(self, user_entity: UserEntity) -> str:
        """Mint a token the way the authentication service does (used by tests and local tooling)."""
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(user_entity.id),
            'exp': now + timedelta(days=self.token_expire_days),
            'iat': now,
            'user_id': user_entity.id,
            'email': user_entity.email,
            'name': user_entity.name,
            'role': user_entity.role.value,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as e:
            raise AuthenticationError('Invalid token') from e

    def get_current_user_info_from_jwt(self, token: Optional[str]) -> UserEntity:
        if not token:
            raise AuthenticationError('Not authenticated')

        payload = self.decode_jwt_token(token)

        user_id = payload.get('user_id')
        role = payload.get('role')
        if not isinstance(user_id, int) or role not in {r.value for r in UserRole}:
            raise AuthenticationError('Invalid token')

        # Rebuild the principal from the token (no DB query)
        return UserEntity(
            id=user_id,
            role=UserRole(role),
            name=payload.get('name') or '',
            email=payload.get('email') or '',
        )
