"""
Entités Tag et ProjectTag - Étiquettes globales et table de liaison projet <-> tag
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Tag:
    """Tag partagé entre projets, créé à la première utilisation"""
    name: str
    id: Optional[int] = None

    def matches(self, name: str) -> bool:
        """Comparaison de nom insensible à la casse"""
        return self.name.lower() == name.lower()


@dataclass
class ProjectTag:
    """Ligne de liaison many-to-many entre Project et Tag"""
    project_id: int
    tag_id: int
    id: Optional[int] = None
