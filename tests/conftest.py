"""Fixtures pytest : un store neuf par test."""

import pytest
from fastapi.testclient import TestClient

from app import create_app
from application.services import LikeService, ProjectService, TagService, UserService
from config import DEFAULT_TAGS
from domain.entities import Project, User
from infrastructure.dependencies import get_password_hasher
from infrastructure.memory import (
    MemoryStore,
    InMemoryLikeRepository,
    InMemoryProjectRepository,
    InMemoryTagRepository,
    InMemoryUserRepository,
)
from infrastructure.security.password_hasher import PasswordHasher


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore(default_tags=DEFAULT_TAGS)


@pytest.fixture
def empty_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def fast_hasher() -> PasswordHasher:
    """Hachage en clair : bcrypt est trop lent pour la suite de tests"""
    return PasswordHasher(schemes=("plaintext",))


@pytest.fixture
def user_repo(store):
    return InMemoryUserRepository(store)


@pytest.fixture
def project_repo(store):
    return InMemoryProjectRepository(store)


@pytest.fixture
def tag_repo(store):
    return InMemoryTagRepository(store)


@pytest.fixture
def like_repo(store):
    return InMemoryLikeRepository(store)


@pytest.fixture
def user_service(user_repo, fast_hasher):
    return UserService(user_repo, fast_hasher)


@pytest.fixture
def tag_service(tag_repo):
    return TagService(tag_repo)


@pytest.fixture
def project_service(project_repo, tag_service, like_repo):
    return ProjectService(project_repo, tag_service, like_repo)


@pytest.fixture
def like_service(like_repo, project_repo):
    return LikeService(like_repo, project_repo)


@pytest.fixture
def owner(user_repo) -> User:
    return user_repo.create(User(
        username="designer",
        hashed_password="hash",
        name="Ana Designer",
        avatar_url="https://cdn.example.com/ana.png"
    ))


@pytest.fixture
def make_project(owner):
    """Fabrique de projets non enregistrés appartenant à `owner`"""
    def _make(**overrides) -> Project:
        fields = {
            "title": "Landing page",
            "description": "Refonte du site vitrine",
            "image_url": "https://cdn.example.com/cover.png",
            "user_id": owner.id,
            "category": "Website",
        }
        fields.update(overrides)
        return Project(**fields)
    return _make


@pytest.fixture
def app(store, fast_hasher):
    application = create_app(store=store)
    application.dependency_overrides[get_password_hasher] = lambda: fast_hasher
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_user(client):
    """Inscrit un utilisateur et retourne ses en-têtes d'authentification"""
    def _register(username: str = "designer", name: str = "Ana Designer") -> dict:
        response = client.post("/api/register", json={
            "username": username,
            "password": "secret-pass",
            "name": name,
        })
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}
    return _register


@pytest.fixture
def auth_headers(register_user) -> dict:
    return register_user()
