"""Errors and warnings raised while building a klippy."""


class KlippyError(Exception):
    """Base class for fatal klippy errors."""


class InvalidArgument(KlippyError, ValueError):
    """An option has the wrong type, shape, or value."""


class InvalidColor(KlippyError, ValueError):
    """A color specification cannot be resolved to RGB."""


class PositionConflict(UserWarning):
    """Both sides of a position axis were requested; one side wins."""
