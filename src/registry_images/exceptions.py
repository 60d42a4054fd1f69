"""Custom exceptions for the registry images client."""


class RegistryImagesError(Exception):
    """Base exception for all registry images errors."""

    pass


class ValidationError(RegistryImagesError):
    """Raised when an image reference is malformed."""

    pass


class ConfigurationError(RegistryImagesError):
    """Raised when settings are missing or invalid."""

    pass


class AuthError(RegistryImagesError):
    """Raised when registry credentials cannot be issued."""

    pass


class PatternError(RegistryImagesError):
    """Raised when a repository filter is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid filter pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class RegistryError(RegistryImagesError):
    """Raised when a registry endpoint answers with a non-success status."""

    def __init__(
        self,
        op: str,
        status: int | None = None,
        status_text: str = "",
        message: str | None = None,
    ) -> None:
        if message is None:
            message = f"Registry {op} request failed: {status} {status_text}".rstrip()
        super().__init__(message)
        self.op = op
        self.status = status
        self.status_text = status_text


class RegistryConnectionError(RegistryError):
    """Raised when unable to reach the registry."""

    def __init__(self, op: str, reason: str) -> None:
        super().__init__(op, message=f"Unable to reach registry during {op}: {reason}")
        self.reason = reason


class DigestNotFoundError(RegistryError):
    """Raised when a manifest lookup succeeds without a digest header."""

    def __init__(self, tag: str) -> None:
        super().__init__("head-manifest", message=f'Digest not found for tag "{tag}".')
        self.tag = tag


class GarbageCollectionError(RegistryError):
    """Raised when layer garbage collection fails after a tag was deleted."""

    def __init__(
        self, reference: str, status: int | None, status_text: str = ""
    ) -> None:
        detail = status_text if status is None else f"{status} {status_text}".rstrip()
        super().__init__(
            "gc",
            status,
            status_text,
            message=(
                f"Deleted tag {reference}, but layer garbage collection failed: "
                f"{detail}"
            ),
        )
        self.reference = reference
