"""
Exceptions du domaine
"""


class NotFoundError(ValueError):
    """L'identifiant référencé n'existe pas"""


class ProjectNotFoundError(NotFoundError):
    def __init__(self, project_id: int):
        super().__init__(f"Project with id {project_id} not found")
        self.project_id = project_id


class OwnershipViolationError(PermissionError):
    """L'utilisateur courant n'est pas propriétaire de la ressource"""

    def __init__(self, project_id: int, user_id: int):
        super().__init__(f"User {user_id} does not own project {project_id}")
        self.project_id = project_id
        self.user_id = user_id


class DuplicateUsernameError(ValueError):
    def __init__(self, username: str):
        super().__init__(f"Username '{username}' already exists")
        self.username = username
