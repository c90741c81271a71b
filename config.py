"""
portfolio-api/config.py
Configuration de l'API (variables d'environnement PORTFOLIO_*)
"""

from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_TAGS = ["Website", "Mobile App", "3D Design", "UI/UX", "Branding"]


class Config(BaseSettings):
    """Paramètres de l'application chargés depuis l'environnement"""

    model_config = SettingsConfigDict(
        env_prefix="PORTFOLIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Portfolio API"
    version: str = "1.0.0"

    # Serveur
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"
    log_colored: bool = False
    log_file_enabled: bool = False
    log_file_path: str = "logs/portfolio-api.log"

    # JWT
    jwt_secret_key: str = Field(
        default="change-me-in-production",
        description="Clé de signature des tokens (à surcharger en production)",
    )
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = Field(default=10080, ge=1)

    # Données initiales du store
    default_tags: List[str] = Field(default_factory=lambda: list(DEFAULT_TAGS))
