"""Domain layer errors.

Every failure a core operation reports falls into one of three kinds:
NotFound, Conflict or Forbidden. Input that fails validation before any
state is read raises ValidationError.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a uniqueness or state precondition is violated."""

    pass


class ForbiddenError(DomainError):
    """Raised when an actor may not perform a transition."""

    def __init__(self, actor_id: str, action: str, resource_id: str):
        self.actor_id = actor_id
        self.action = action
        self.resource_id = resource_id
        super().__init__(f"User {actor_id} is not authorized to {action} {resource_id}")
