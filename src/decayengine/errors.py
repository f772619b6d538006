# src/decayengine/errors.py


class DecayError(ValueError):
    """Base class for every error raised by decayengine."""


class InvalidConfiguration(DecayError):
    """Half-life (or another computation parameter) is out of range."""


class InvalidInput(DecayError):
    """A user-entered dose field was rejected at the input boundary."""
