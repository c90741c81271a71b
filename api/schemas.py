"""
portfolio-api/api/schemas.py
Schémas Pydantic pour la validation et la sérialisation
"""

from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator
from datetime import datetime

from domain.entities import PublishedStatus, SectionDisplay

MAX_GALLERY_IMAGES = 6

# ============================================================================
# UTILISATEURS / AUTHENTIFICATION
# ============================================================================

class UserCreate(BaseModel):
    """Schéma d'inscription"""
    username: str = Field(..., min_length=3, max_length=50)
    password: str = Field(..., min_length=4)
    name: str = Field(..., min_length=1)
    avatar_url: Optional[str] = None

class UserLogin(BaseModel):
    username: str
    password: str

class UserResponse(BaseModel):
    """Utilisateur sans son hachage de mot de passe"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: str
    avatar_url: Optional[str] = None

class Token(BaseModel):
    access_token: str
    token_type: str

class AuthResponse(Token):
    user: UserResponse

# ============================================================================
# TAGS
# ============================================================================

class TagResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str

def _clean_tags(tags: Optional[List[str]]) -> Optional[List[str]]:
    if tags is None:
        return None
    return [t.strip() for t in tags if t and t.strip()]

# ============================================================================
# PROJETS
# ============================================================================

class ProjectCreate(BaseModel):
    """Schéma pour créer un projet (le propriétaire vient de la session)"""
    title: str = Field(..., min_length=1)
    description: str
    image_url: str = Field(..., min_length=1)
    gallery_images: List[str] = Field(default_factory=list, max_length=MAX_GALLERY_IMAGES)
    figma_url: Optional[str] = None
    video_url: Optional[str] = None
    section_display: SectionDisplay = SectionDisplay.GENERAL
    category: str = Field(..., min_length=1)
    published_status: PublishedStatus = PublishedStatus.DRAFT
    tags: List[str] = Field(default_factory=list)

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, tags):
        return _clean_tags(tags)

class ProjectUpdate(BaseModel):
    """
    Schéma de mise à jour : seuls les champs envoyés sont modifiés.
    `tags` absent = tags inchangés ; `tags` présent = remplacement complet.
    """
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    image_url: Optional[str] = Field(None, min_length=1)
    gallery_images: Optional[List[str]] = Field(None, max_length=MAX_GALLERY_IMAGES)
    figma_url: Optional[str] = None
    video_url: Optional[str] = None
    section_display: Optional[SectionDisplay] = None
    category: Optional[str] = Field(None, min_length=1)
    published_status: Optional[PublishedStatus] = None
    tags: Optional[List[str]] = None

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, tags):
        return _clean_tags(tags)

    @model_validator(mode="after")
    def required_fields_not_null(self):
        """Les champs obligatoires peuvent être omis mais pas mis à null"""
        for name in ("title", "description", "image_url", "gallery_images",
                     "section_display", "category", "published_status"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"'{name}' cannot be null")
        return self

    def changes(self) -> dict:
        """Champs du projet réellement envoyés (sans les tags)"""
        return self.model_dump(exclude_unset=True, exclude={"tags"})

class ProjectStatusUpdate(BaseModel):
    published_status: PublishedStatus

class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    image_url: str
    gallery_images: List[str] = Field(default_factory=list)
    figma_url: Optional[str] = None
    video_url: Optional[str] = None
    section_display: SectionDisplay
    user_id: int
    category: str
    published_status: PublishedStatus
    created_at: Optional[datetime] = None

    @field_serializer('created_at')
    def serialize_created_at(self, dt: Optional[datetime], _info):
        if dt is None:
            return None
        return dt.isoformat()

class ProjectOwnerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    avatar_url: Optional[str] = None

class ProjectWithTagsResponse(BaseModel):
    """Projet + propriétaire + tags, tel que consommé par le front"""
    model_config = ConfigDict(from_attributes=True)

    project: ProjectResponse
    user: ProjectOwnerResponse
    tags: List[TagResponse] = Field(default_factory=list)

# ============================================================================
# LIKES
# ============================================================================

class LikeResponse(BaseModel):
    """Résultat d'un like / unlike"""
    success: bool
    liked: bool
    likes_count: int

class LikeStatusResponse(BaseModel):
    liked: bool
    likes_count: int
