"""Exception types raised by the sequence core."""


class SequenceError(ValueError):
    """Base class for sequence generation and analysis errors."""


class InvalidArgumentError(SequenceError):
    """Raised when generation is requested with an unusable step count."""


class EmptyInputError(SequenceError):
    """Raised when statistics are requested for a sequence with no records."""


class ProviderExhaustedError(SequenceError):
    """Raised when a non-cycling replay provider runs out of scripted draws."""
