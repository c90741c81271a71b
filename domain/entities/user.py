"""
Entité User - Modèle métier pour les utilisateurs (propriétaires de portfolio)
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """Entité User du domaine"""
    username: str
    hashed_password: str
    name: str
    avatar_url: Optional[str] = None
    id: Optional[int] = None

    def __post_init__(self):
        """Validation de l'entité"""
        if not self.username:
            raise ValueError("Username cannot be empty")
        if not self.hashed_password:
            raise ValueError("Hashed password cannot be empty")
