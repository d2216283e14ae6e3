"""Application error types."""


class MediMateError(Exception):
    """Base class for application errors."""


class AIUnavailableError(MediMateError):
    """Raised when AI features are used without a configured API key."""


class MedicationParseError(MediMateError):
    """Raised when free-form input could not be turned into a draft."""


class InvalidMedicationError(MediMateError):
    """Raised when a medication form is incomplete."""
