class ContentError(Exception):
    """Base class for every failure raised while loading blog content."""


class ContentIOError(ContentError):
    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to read {self.path}: {reason}")


class FrontmatterParseError(ContentError):
    def __init__(self, path, reason):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to parse frontmatter in {self.path}: {reason}")


class MissingFieldError(ContentError):
    def __init__(self, path, field: str = "frontmatter"):
        self.path = str(path)
        self.field = field
        super().__init__(f"Missing required {field} in {self.path}")


class InvalidPathError(ContentError):
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Invalid content path: {slug!r}")


class NotFoundError(ContentError):
    kind = "Content"

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"{self.kind} not found: {slug}")


class PostNotFoundError(NotFoundError):
    kind = "Post"


class PageNotFoundError(NotFoundError):
    kind = "Page"
