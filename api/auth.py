"""
portfolio-api/api/auth.py
Dépendances d'authentification (token Bearer -> utilisateur courant)
"""

import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from domain.entities.user import User
from infrastructure.dependencies import get_user_service, get_jwt_service
from application.services.user_service import UserService
from infrastructure.security.jwt_service import JWTService

logger = logging.getLogger(__name__)

# Cible l'endpoint /api/auth/token (formulaire OAuth2 de la doc Swagger)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/token")


def get_current_user(
    token: str = Depends(oauth2_scheme),
    user_service: UserService = Depends(get_user_service),
    jwt_service: JWTService = Depends(get_jwt_service)
) -> User:
    """
    Dépendance FastAPI : décode le token JWT et retourne l'utilisateur.
    Le store fait confiance à l'ID ainsi obtenu sans revérifier le mot de passe.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = jwt_service.decode_token(token)
    except ValueError as e:
        logger.warning(f"JWTError: Failed to decode token: {e}")
        raise credentials_exception

    username = payload.get("sub")
    if username is None:
        raise credentials_exception

    user = user_service.get_user_by_username(username)
    if user is None:
        logger.warning(f"JWT invalid: User '{username}' not found in store")
        raise credentials_exception

    if payload.get("uid") != user.id:
        logger.warning(f"JWT stale: id mismatch for user '{username}'")
        raise credentials_exception

    return user
