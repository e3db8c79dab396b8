"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidTimestamp(ValidationError):
    """Raised when a submitted publish date cannot be parsed."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid publish timestamp: {value!r}")


class SlugConflictError(DomainError):
    """Raised when a slug is already taken within its content kind."""

    def __init__(self, kind: str, slug: str):
        self.kind = kind
        self.slug = slug
        super().__init__("Slug already exists")


class AuthenticationError(DomainError):
    """Raised when admin credentials are rejected."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
