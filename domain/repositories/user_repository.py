"""
Interface UserRepository - Définit les opérations d'accès aux données pour User
"""

from abc import ABC, abstractmethod
from typing import Optional
from domain.entities.user import User


class UserRepository(ABC):
    """Interface pour le repository des utilisateurs"""

    @abstractmethod
    def find_by_id(self, user_id: int) -> Optional[User]:
        """Trouve un utilisateur par son ID"""
        pass

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[User]:
        """Trouve un utilisateur par son nom d'utilisateur (correspondance exacte)"""
        pass

    @abstractmethod
    def create(self, user: User) -> User:
        """Enregistre un nouvel utilisateur et lui attribue un ID"""
        pass
