"""Domain-specific exceptions: framework-independent."""


class AuthenticationError(Exception):
    """Raised when no principal could be resolved for the current request."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class AuthorizationError(Exception):
    """Raised when a resolved principal lacks the rights for an action."""

    def __init__(self, principal_email: str, action: str, article_id: str | None = None):
        self.principal_email = principal_email
        self.action = action
        self.article_id = article_id
        target = f" on article '{article_id}'" if article_id else ""
        super().__init__(f"'{principal_email}' may not {action}{target}")


class InvalidArgumentError(Exception):
    """Raised for malformed input; carries the message key to report."""

    def __init__(self, message_key: str, detail: str):
        self.message_key = message_key
        self.detail = detail
        super().__init__(detail)


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class CollaboratorError(Exception):
    """Raised when a storage or other backing service fails.

    The original exception is chained; its detail is for logs only.
    """

    def __init__(self, collaborator: str, operation: str):
        self.collaborator = collaborator
        self.operation = operation
        super().__init__(f"[{collaborator}] {operation} failed")
