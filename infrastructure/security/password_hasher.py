"""
PasswordHasher - Hachage des mots de passe des comptes propriétaires
"""

from typing import Sequence
from passlib.context import CryptContext


class PasswordHasher:
    """Hachage et vérification des mots de passe (bcrypt via passlib)"""

    def __init__(self, schemes: Sequence[str] = ("bcrypt",)):
        self.pwd_context = CryptContext(schemes=list(schemes), deprecated="auto")

    def hash(self, password: str) -> str:
        return self.pwd_context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """False si le mot de passe ne correspond pas ou si le hachage est illisible"""
        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except ValueError:
            return False
