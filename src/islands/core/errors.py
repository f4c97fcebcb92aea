"""Exceptions raised by the placement engine."""


class IslandsError(Exception):
    """Base class for all islands errors."""


class InvalidParameter(IslandsError, ValueError):
    """A grid dimension, period, amplitude or epsilon is not strictly positive."""


class DegenerateSampler(IslandsError, RuntimeError):
    """Sampling was requested while the total sampling mass is zero."""
