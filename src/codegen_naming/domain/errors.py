"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class NamingError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                           Path related errors
# ============================================================================


class InvalidPathError(NamingError, ValueError):
    """Raised when a path argument is empty or consists only of whitespace."""

    def __init__(self, argument: str, value: str) -> None:
        super().__init__(f"Path '{argument}' cannot be empty or whitespace.")
        self.argument = argument
        self.value = value


class UnknownPlatformError(NamingError, ValueError):
    """Raised when a platform name does not map to a known path policy."""

    def __init__(self, name: str, known: tuple[str, ...]) -> None:
        super().__init__(
            f"Unknown platform '{name}'. Expected one of: {', '.join(known)}."
        )
        self.name = name
        self.known = known
