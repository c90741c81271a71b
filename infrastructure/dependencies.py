"""
Dépendances FastAPI pour l'injection de services

Le MemoryStore est créé une seule fois par create_app() et rangé dans
app.state.store ; chaque requête construit ses repositories et services
par-dessus cette instance partagée.
"""

from fastapi import Depends, Request

from config import Config
from infrastructure.memory import (
    MemoryStore,
    InMemoryUserRepository,
    InMemoryProjectRepository,
    InMemoryTagRepository,
    InMemoryLikeRepository
)
from infrastructure.security.password_hasher import PasswordHasher
from infrastructure.security.jwt_service import JWTService
from application.services.user_service import UserService
from application.services.tag_service import TagService
from application.services.project_service import ProjectService
from application.services.like_service import LikeService

_password_hasher = PasswordHasher()


def get_config(request: Request) -> Config:
    """Configuration de l'application courante"""
    return request.app.state.config


def get_store(request: Request) -> MemoryStore:
    """Dépendance pour obtenir le store partagé du processus"""
    return request.app.state.store


def get_user_repository(store: MemoryStore = Depends(get_store)) -> InMemoryUserRepository:
    return InMemoryUserRepository(store)


def get_project_repository(store: MemoryStore = Depends(get_store)) -> InMemoryProjectRepository:
    return InMemoryProjectRepository(store)


def get_tag_repository(store: MemoryStore = Depends(get_store)) -> InMemoryTagRepository:
    return InMemoryTagRepository(store)


def get_like_repository(store: MemoryStore = Depends(get_store)) -> InMemoryLikeRepository:
    return InMemoryLikeRepository(store)


def get_password_hasher() -> PasswordHasher:
    """Dépendance pour obtenir le PasswordHasher (CryptContext partagé)"""
    return _password_hasher


def get_jwt_service(config: Config = Depends(get_config)) -> JWTService:
    """Dépendance pour obtenir le JWTService"""
    return JWTService(
        secret_key=config.jwt_secret_key,
        algorithm=config.jwt_algorithm,
        expire_minutes=config.jwt_expire_minutes
    )


def get_user_service(
    user_repository: InMemoryUserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher)
) -> UserService:
    """Dépendance pour obtenir le UserService"""
    return UserService(user_repository, password_hasher)


def get_tag_service(
    tag_repository: InMemoryTagRepository = Depends(get_tag_repository)
) -> TagService:
    return TagService(tag_repository)


def get_project_service(
    project_repository: InMemoryProjectRepository = Depends(get_project_repository),
    tag_service: TagService = Depends(get_tag_service),
    like_repository: InMemoryLikeRepository = Depends(get_like_repository)
) -> ProjectService:
    """Dépendance pour obtenir le ProjectService"""
    return ProjectService(project_repository, tag_service, like_repository)


def get_like_service(
    like_repository: InMemoryLikeRepository = Depends(get_like_repository),
    project_repository: InMemoryProjectRepository = Depends(get_project_repository)
) -> LikeService:
    return LikeService(like_repository, project_repository)
