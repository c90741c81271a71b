"""
UserService - Service applicatif pour la gestion des utilisateurs
"""

import logging
from typing import Optional
from domain.entities.user import User
from domain.exceptions import DuplicateUsernameError
from domain.repositories.user_repository import UserRepository
from infrastructure.security.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)


class UserService:
    """Service pour la gestion des utilisateurs"""

    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    def authenticate(self, username: str, password: str) -> Optional[User]:
        """Authentifie un utilisateur avec son nom d'utilisateur et mot de passe"""
        user = self.user_repository.find_by_username(username)
        if not user:
            logger.warning(f"Authentication failed: User '{username}' not found")
            return None

        if not self.password_hasher.verify(password, user.hashed_password):
            logger.warning(f"Authentication failed: Invalid password for user '{username}'")
            return None

        logger.info(f"Authentication success: User '{username}' authenticated")
        return user

    def register(
        self,
        username: str,
        password: str,
        name: str,
        avatar_url: Optional[str] = None
    ) -> User:
        """Crée un compte (le hachage du mot de passe est stocké, jamais le clair)"""
        if self.user_repository.find_by_username(username):
            raise DuplicateUsernameError(username)

        user = self.user_repository.create(User(
            username=username,
            hashed_password=self.password_hasher.hash(password),
            name=name,
            avatar_url=avatar_url
        ))
        logger.info(f"User '{username}' registered with id {user.id}")
        return user

    def get_user(self, user_id: int) -> Optional[User]:
        """Récupère un utilisateur par son ID"""
        return self.user_repository.find_by_id(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        """Récupère un utilisateur par son nom d'utilisateur"""
        return self.user_repository.find_by_username(username)
