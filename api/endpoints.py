"""
portfolio-api/api/endpoints.py
Endpoints de l'API du portfolio
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from fastapi.security import OAuth2PasswordRequestForm

from api import schemas
from api.auth import get_current_user
from api.dependencies import get_client_fingerprint
from application.services.like_service import LikeService
from application.services.project_service import ProjectService
from application.services.tag_service import TagService
from application.services.user_service import UserService
from domain.entities import Project, ProjectWithTags, PublishedStatus, SectionDisplay, User
from domain.exceptions import (
    DuplicateUsernameError, OwnershipViolationError, ProjectNotFoundError
)
from infrastructure.dependencies import (
    get_jwt_service, get_like_service, get_project_service, get_tag_service,
    get_user_service
)
from infrastructure.security.jwt_service import JWTService

logger = logging.getLogger(__name__)
router = APIRouter()
auth_router = APIRouter()

# ============================================================================
# HELPERS
# ============================================================================

def _not_found(project_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Project {project_id} not found"
    )


def _get_owned_project(
    project_service: ProjectService,
    project_id: int,
    current_user: User
) -> ProjectWithTags:
    """Vérifie l'existence puis la propriété avant toute mutation"""
    try:
        return project_service.get_owned_project(project_id, current_user.id)
    except ProjectNotFoundError:
        raise _not_found(project_id)
    except OwnershipViolationError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: You don't own this project"
        )

# ============================================================================
# AUTHENTIFICATION
# ============================================================================

@auth_router.post("/register", response_model=schemas.AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_in: schemas.UserCreate,
    user_service: UserService = Depends(get_user_service),
    jwt_service: JWTService = Depends(get_jwt_service)
):
    """Crée un compte propriétaire et ouvre sa session"""
    try:
        user = user_service.register(
            username=user_in.username,
            password=user_in.password,
            name=user_in.name,
            avatar_url=user_in.avatar_url
        )
    except DuplicateUsernameError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    return {
        "access_token": jwt_service.create_user_token(user),
        "token_type": "bearer",
        "user": user
    }


@auth_router.post("/login", response_model=schemas.AuthResponse)
def login(
    credentials: schemas.UserLogin,
    user_service: UserService = Depends(get_user_service),
    jwt_service: JWTService = Depends(get_jwt_service)
):
    """Connexion JSON (username/password) pour le dashboard"""
    user = user_service.authenticate(credentials.username, credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return {
        "access_token": jwt_service.create_user_token(user),
        "token_type": "bearer",
        "user": user
    }


@auth_router.post("/auth/token", response_model=schemas.Token)
def login_for_access_token(
    form_data: OAuth2PasswordRequestForm = Depends(),
    user_service: UserService = Depends(get_user_service),
    jwt_service: JWTService = Depends(get_jwt_service)
):
    """Fournit un token JWT en échange de username/password (formulaire OAuth2)"""
    user = user_service.authenticate(form_data.username, form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return {"access_token": jwt_service.create_user_token(user), "token_type": "bearer"}


@auth_router.get("/user", response_model=schemas.UserResponse)
def get_user_profile(current_user: User = Depends(get_current_user)):
    """Retourne le profil de l'utilisateur courant."""
    return current_user

# ============================================================================
# PROJETS - LECTURE
# ============================================================================

@router.get("/projects", response_model=List[schemas.ProjectWithTagsResponse], tags=["Projects"])
def list_projects(
    status_filter: Optional[PublishedStatus] = Query(None, alias="status"),
    section: Optional[SectionDisplay] = Query(None),
    category: Optional[str] = Query(None),
    tag: Optional[str] = Query(None),
    project_service: ProjectService = Depends(get_project_service)
):
    """Liste les projets (ordre d'insertion), filtres optionnels"""
    return project_service.get_all_projects(
        status=status_filter,
        section=section,
        category=category,
        tag=tag
    )


@router.get("/projects/{project_id}", response_model=schemas.ProjectWithTagsResponse, tags=["Projects"])
def get_project(
    project_id: int,
    project_service: ProjectService = Depends(get_project_service)
):
    project = project_service.get_project(project_id)
    if project is None:
        raise _not_found(project_id)
    return project


@router.get("/user/projects", response_model=List[schemas.ProjectWithTagsResponse], tags=["Projects"])
def list_user_projects(
    current_user: User = Depends(get_current_user),
    project_service: ProjectService = Depends(get_project_service)
):
    """Projets de l'utilisateur courant (dashboard), tous statuts confondus"""
    return project_service.get_user_projects(current_user.id)

# ============================================================================
# PROJETS - MUTATIONS (propriétaire uniquement)
# ============================================================================

@router.post(
    "/projects",
    response_model=schemas.ProjectWithTagsResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Projects"]
)
def create_project(
    project_in: schemas.ProjectCreate,
    current_user: User = Depends(get_current_user),
    project_service: ProjectService = Depends(get_project_service)
):
    """Crée un projet appartenant à l'utilisateur courant"""
    project = Project(
        user_id=current_user.id,
        **project_in.model_dump(exclude={"tags"})
    )
    try:
        return project_service.create_project(project, project_in.tags)
    except Exception as e:
        logger.error(f"Error creating project: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create project"
        )


@router.put("/projects/{project_id}", response_model=schemas.ProjectWithTagsResponse, tags=["Projects"])
def update_project(
    project_id: int,
    project_in: schemas.ProjectUpdate,
    current_user: User = Depends(get_current_user),
    project_service: ProjectService = Depends(get_project_service)
):
    """Met à jour un projet ; `tags` remplace entièrement les tags existants"""
    _get_owned_project(project_service, project_id, current_user)

    try:
        return project_service.update_project(project_id, project_in.changes(), project_in.tags)
    except ProjectNotFoundError:
        raise _not_found(project_id)


@router.delete(
    "/projects/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    tags=["Projects"]
)
def delete_project(
    project_id: int,
    current_user: User = Depends(get_current_user),
    project_service: ProjectService = Depends(get_project_service)
):
    _get_owned_project(project_service, project_id, current_user)

    try:
        project_service.delete_project(project_id)
    except ProjectNotFoundError:
        raise _not_found(project_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/projects/{project_id}/status", response_model=schemas.ProjectWithTagsResponse, tags=["Projects"])
def update_project_status(
    project_id: int,
    status_in: schemas.ProjectStatusUpdate,
    current_user: User = Depends(get_current_user),
    project_service: ProjectService = Depends(get_project_service)
):
    """Publie, masque ou repasse en brouillon un projet"""
    _get_owned_project(project_service, project_id, current_user)

    try:
        return project_service.update_status(project_id, status_in.published_status)
    except ProjectNotFoundError:
        raise _not_found(project_id)

# ============================================================================
# TAGS
# ============================================================================

@router.get("/tags", response_model=List[schemas.TagResponse], tags=["Tags"])
def list_tags(tag_service: TagService = Depends(get_tag_service)):
    return tag_service.get_all_tags()

# ============================================================================
# LIKES (anonymes, par empreinte IP + User-Agent)
# ============================================================================

@router.post("/projects/{project_id}/like", response_model=schemas.LikeResponse, tags=["Likes"])
def like_project(
    project_id: int,
    fingerprint: str = Depends(get_client_fingerprint),
    like_service: LikeService = Depends(get_like_service)
):
    try:
        return like_service.like(project_id, fingerprint)
    except ProjectNotFoundError:
        raise _not_found(project_id)


@router.delete("/projects/{project_id}/like", response_model=schemas.LikeResponse, tags=["Likes"])
def unlike_project(
    project_id: int,
    fingerprint: str = Depends(get_client_fingerprint),
    like_service: LikeService = Depends(get_like_service)
):
    try:
        return like_service.unlike(project_id, fingerprint)
    except ProjectNotFoundError:
        raise _not_found(project_id)


@router.get("/projects/{project_id}/like-status", response_model=schemas.LikeStatusResponse, tags=["Likes"])
def get_like_status(
    project_id: int,
    fingerprint: str = Depends(get_client_fingerprint),
    like_service: LikeService = Depends(get_like_service)
):
    try:
        return like_service.status(project_id, fingerprint)
    except ProjectNotFoundError:
        raise _not_found(project_id)
