"""
Implémentations en mémoire des repositories
"""

import copy
import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from domain.entities import (
    User, Project, ProjectOwner, ProjectWithTags, Tag, ProjectTag, UNKNOWN_OWNER
)
from domain.exceptions import ProjectNotFoundError
from domain.repositories import (
    UserRepository, ProjectRepository, TagRepository, LikeRepository
)
from infrastructure.memory.store import MemoryStore

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """Implémentation en mémoire du UserRepository"""

    def __init__(self, store: MemoryStore):
        self.store = store

    def find_by_id(self, user_id: int) -> Optional[User]:
        with self.store.lock:
            user = self.store.users.get(user_id)
            return copy.deepcopy(user) if user else None

    def find_by_username(self, username: str) -> Optional[User]:
        with self.store.lock:
            user = next(
                (u for u in self.store.users.values() if u.username == username),
                None
            )
            return copy.deepcopy(user) if user else None

    def create(self, user: User) -> User:
        with self.store.lock:
            user_id = self.store.next_id("users")
            stored = replace(user, id=user_id)
            self.store.users[user_id] = stored
            return copy.deepcopy(stored)


class InMemoryProjectRepository(ProjectRepository):
    """
    Implémentation en mémoire du ProjectRepository.

    Les méthodes *_with_tags assemblent le modèle de lecture ProjectWithTags
    en joignant Project -> User et Project -> ProjectTag -> Tag.
    """

    def __init__(self, store: MemoryStore):
        self.store = store

    def find_by_id(self, project_id: int) -> Optional[Project]:
        with self.store.lock:
            project = self.store.projects.get(project_id)
            return copy.deepcopy(project) if project else None

    def create(self, project: Project) -> Project:
        with self.store.lock:
            project_id = self.store.next_id("projects")
            stored = replace(
                copy.deepcopy(project),
                id=project_id,
                created_at=datetime.now(timezone.utc)
            )
            self.store.projects[project_id] = stored
            return copy.deepcopy(stored)

    def update(self, project_id: int, project: Project) -> Project:
        with self.store.lock:
            existing = self.store.projects.get(project_id)
            if existing is None:
                raise ProjectNotFoundError(project_id)

            stored = replace(
                copy.deepcopy(project),
                id=existing.id,
                created_at=existing.created_at
            )
            self.store.projects[project_id] = stored
            return copy.deepcopy(stored)

    def delete(self, project_id: int) -> None:
        with self.store.lock:
            self.store.projects.pop(project_id, None)

    def find_all_with_tags(self) -> List[ProjectWithTags]:
        with self.store.lock:
            return [self._assemble(p) for p in self.store.projects.values()]

    def find_with_tags(self, project_id: int) -> Optional[ProjectWithTags]:
        with self.store.lock:
            project = self.store.projects.get(project_id)
            if project is None:
                return None
            return self._assemble(project)

    def find_by_user_id_with_tags(self, user_id: int) -> List[ProjectWithTags]:
        with self.store.lock:
            return [
                self._assemble(p)
                for p in self.store.projects.values()
                if p.user_id == user_id
            ]

    def _assemble(self, project: Project) -> ProjectWithTags:
        """Jointure d'un projet avec son propriétaire et ses tags (lock déjà pris)"""
        user = self.store.users.get(project.user_id)
        if user is not None:
            owner = ProjectOwner(id=user.id, name=user.name, avatar_url=user.avatar_url)
        else:
            logger.debug(f"Project {project.id}: owner {project.user_id} not found, using placeholder")
            owner = replace(UNKNOWN_OWNER)

        tags = []
        for link in self.store.project_tags.values():
            if link.project_id != project.id:
                continue
            tag = self.store.tags.get(link.tag_id)
            # Liaison vers un tag disparu : ignorée
            if tag is not None:
                tags.append(replace(tag))

        return ProjectWithTags(project=copy.deepcopy(project), user=owner, tags=tags)


class InMemoryTagRepository(TagRepository):
    """Implémentation en mémoire du TagRepository"""

    def __init__(self, store: MemoryStore):
        self.store = store

    def find_all(self) -> List[Tag]:
        with self.store.lock:
            return [replace(t) for t in self.store.tags.values()]

    def find_by_id(self, tag_id: int) -> Optional[Tag]:
        with self.store.lock:
            tag = self.store.tags.get(tag_id)
            return replace(tag) if tag else None

    def find_by_name(self, name: str) -> Optional[Tag]:
        with self.store.lock:
            tag = next((t for t in self.store.tags.values() if t.matches(name)), None)
            return replace(tag) if tag else None

    def create(self, tag: Tag) -> Tag:
        with self.store.lock:
            tag_id = self.store.next_id("tags")
            stored = replace(tag, id=tag_id)
            self.store.tags[tag_id] = stored
            return replace(stored)

    def get_or_create(self, name: str) -> Tuple[Tag, bool]:
        with self.store.lock:
            existing = self.find_by_name(name)
            if existing:
                return existing, False
            return self.create(Tag(name=name)), True

    def add_to_project(self, project_id: int, tag_id: int) -> ProjectTag:
        with self.store.lock:
            link_id = self.store.next_id("project_tags")
            link = ProjectTag(id=link_id, project_id=project_id, tag_id=tag_id)
            self.store.project_tags[link_id] = link
            return replace(link)

    def remove_from_project(self, project_id: int) -> int:
        with self.store.lock:
            stale = [
                link_id for link_id, link in self.store.project_tags.items()
                if link.project_id == project_id
            ]
            for link_id in stale:
                del self.store.project_tags[link_id]
            return len(stale)

    def find_project_tags(self, project_id: int) -> List[ProjectTag]:
        with self.store.lock:
            return [
                replace(link) for link in self.store.project_tags.values()
                if link.project_id == project_id
            ]


class InMemoryLikeRepository(LikeRepository):
    """Implémentation en mémoire du LikeRepository"""

    def __init__(self, store: MemoryStore):
        self.store = store

    def add(self, project_id: int, fingerprint: str) -> bool:
        with self.store.lock:
            fingerprints = self.store.likes.setdefault(project_id, set())
            if fingerprint in fingerprints:
                return False
            fingerprints.add(fingerprint)
            return True

    def remove(self, project_id: int, fingerprint: str) -> bool:
        with self.store.lock:
            fingerprints = self.store.likes.get(project_id)
            if not fingerprints or fingerprint not in fingerprints:
                return False
            fingerprints.discard(fingerprint)
            if not fingerprints:
                del self.store.likes[project_id]
            return True

    def exists(self, project_id: int, fingerprint: str) -> bool:
        with self.store.lock:
            return fingerprint in self.store.likes.get(project_id, ())

    def count(self, project_id: int) -> int:
        with self.store.lock:
            return len(self.store.likes.get(project_id, ()))

    def clear(self, project_id: int) -> None:
        with self.store.lock:
            self.store.likes.pop(project_id, None)
