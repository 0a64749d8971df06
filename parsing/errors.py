"""FAF parsing errors."""

from typing import Optional


class FafError(Exception):
    """Base class for all FAF parsing failures."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class EmptyContentError(FafError):
    """Input was empty or whitespace-only."""

    def __init__(self):
        super().__init__("Empty content")


class FafSyntaxError(FafError):
    """Content is not valid YAML or does not match the FAF schema types."""

    prefix = "Invalid YAML"

    def __init__(self, detail: str, cause: Optional[BaseException] = None):
        super().__init__(f"{self.prefix}: {detail}", cause)
        self.detail = detail


class FafTypeError(FafSyntaxError):
    """YAML decoded, but a value has the wrong shape (e.g. a scalar for a list)."""

    prefix = "Invalid field type"


class MissingFieldError(FafError):
    """A structurally required field is absent."""

    def __init__(self, field: str, cause: Optional[BaseException] = None):
        super().__init__(f"Missing required field: {field}", cause)
        self.field = field


class FafIOError(FafError):
    """Reading a .faf file from disk failed."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"IO error reading {path}{detail}", cause)
        self.path = path
