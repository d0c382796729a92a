"""Exceptions raised by point-set geometry routines."""


class GeometryError(Exception):
    """Base exception for point-set geometry in torchbezier."""

    pass


class InsufficientPointsError(GeometryError):
    """The point set is too small to bound, e.g. it has no points."""

    pass
