"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class InvalidParentCommentError(BusinessRuleViolationError):
    """Raised when a reply targets a parent that cannot hold it."""

    def __init__(self, parent_id: int, reason: str):
        self.parent_id = parent_id
        super().__init__(f"Invalid parent comment {parent_id}: {reason}")


class PermissionDeniedError(DomainError):
    """Raised when the actor may not perform an operation on a resource."""

    pass


class NotAuthorizedError(PermissionDeniedError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class EditWindowExpiredError(PermissionDeniedError):
    """Raised when a comment is edited after its edit window closed."""

    def __init__(self, comment_id: str, window_minutes: int):
        self.comment_id = comment_id
        self.window_minutes = window_minutes
        super().__init__(
            f"Comment {comment_id} can only be edited within "
            f"{window_minutes} minutes of creation"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
