"""
portfolio-api/api/dependencies.py
Dépendances FastAPI propres à la couche HTTP
"""

from fastapi import Request

from application.services.like_service import build_fingerprint


def get_client_fingerprint(request: Request) -> str:
    """
    Empreinte du visiteur pour les likes anonymes : IP + User-Agent.
    Approximation assumée (IP partagée = même empreinte).
    """
    client_host = request.client.host if request.client else None
    return build_fingerprint(client_host, request.headers.get("user-agent"))
