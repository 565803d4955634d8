class KZGFKError(Exception):
    """Base class of every error raised by kzgfk"""


class DomainError(KZGFKError, ValueError):
    """Evaluation domain of the requested size does not exist"""


class SetupError(KZGFKError):
    """Structured reference string cannot be generated"""
