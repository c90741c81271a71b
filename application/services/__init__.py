"""
Services applicatifs
"""

from application.services.user_service import UserService
from application.services.tag_service import TagService
from application.services.project_service import ProjectService
from application.services.like_service import LikeService

__all__ = [
    "UserService",
    "TagService",
    "ProjectService",
    "LikeService"
]
