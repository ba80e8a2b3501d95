"""Exceptions raised by Kalam Style."""


class InsufficientInputError(ValueError):
    """Text carries no words to fingerprint."""


class InputTooShortError(InsufficientInputError):
    """Text is shorter than the configured minimum for a meaningful analysis."""

    def __init__(self, length: int, minimum: int):
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"Text must be at least {minimum} characters long for meaningful "
            f"linguistic analysis (got {length})"
        )


class UnsupportedFormatError(ValueError):
    """File type cannot be loaded as text."""


class PersonaNotFoundError(LookupError):
    """No persona is stored under the requested id."""


class PersonaNotReadyError(ValueError):
    """Persona exists but its analysis has not completed."""
