"""
JWTService - Service pour la gestion des tokens JWT (session des propriétaires)
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt

from domain.entities.user import User

logger = logging.getLogger(__name__)


class JWTService:
    """Service pour la gestion des tokens JWT"""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 10080):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def create_access_token(self, data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
        """Crée un token JWT"""
        to_encode = data.copy()
        expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=self.expire_minutes))
        to_encode.update({"exp": expire})
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def create_user_token(self, user: User) -> str:
        """Token d'un utilisateur : `sub` = username, `uid` = ID"""
        return self.create_access_token({"sub": user.username, "uid": user.id})

    def decode_token(self, token: str) -> Dict[str, Any]:
        """Décode un token JWT, lève ValueError s'il est invalide ou expiré"""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"JWT decode error: {e}")
            raise ValueError(f"Invalid token: {str(e)}")
