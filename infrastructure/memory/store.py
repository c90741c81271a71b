"""
MemoryStore - Stockage en mémoire partagé par les repositories

Une table (dict indexé par ID) et une séquence d'ID par type d'entité.
Les données vivent aussi longtemps que le processus : aucun fichier, aucune
reprise après redémarrage.
"""

import itertools
import logging
import threading
from typing import Dict, Iterable, Iterator, Optional, Set

from domain.entities import User, Project, Tag, ProjectTag

logger = logging.getLogger(__name__)

TABLES = ("users", "projects", "tags", "project_tags")


class MemoryStore:
    """
    Arène en mémoire pour toutes les entités.

    Une seule instance par processus, créée au démarrage de l'application et
    injectée dans les repositories. FastAPI exécute les endpoints synchrones
    dans un pool de threads : tout accès aux tables se fait sous `lock`.
    """

    def __init__(self, default_tags: Optional[Iterable[str]] = None):
        self.lock = threading.RLock()
        self.users: Dict[int, User] = {}
        self.projects: Dict[int, Project] = {}
        self.tags: Dict[int, Tag] = {}
        self.project_tags: Dict[int, ProjectTag] = {}
        # project_id -> empreintes ayant liké
        self.likes: Dict[int, Set[str]] = {}
        self._sequences: Dict[str, Iterator[int]] = {
            table: itertools.count(1) for table in TABLES
        }

        seeded = 0
        for name in default_tags or []:
            tag_id = self.next_id("tags")
            self.tags[tag_id] = Tag(id=tag_id, name=name)
            seeded += 1
        if seeded:
            logger.debug(f"MemoryStore initialised with {seeded} default tags")

    def next_id(self, table: str) -> int:
        """Prochain ID de la table (monotone, jamais réutilisé)"""
        with self.lock:
            return next(self._sequences[table])

    def stats(self) -> Dict[str, int]:
        """Nombre de lignes par table"""
        with self.lock:
            return {
                "users": len(self.users),
                "projects": len(self.projects),
                "tags": len(self.tags),
                "project_tags": len(self.project_tags),
                "likes": sum(len(fingerprints) for fingerprints in self.likes.values()),
            }
