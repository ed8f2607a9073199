"""Exception types raised by the mandelstep core."""


class InvalidRegion(ValueError):
    """A bounding box with min >= max on either axis (or NaN bounds)."""


class GridMismatchError(ValueError):
    """
    An array handed to the core does not match the engine's grid.

    This always points at a wiring bug in the caller, so it is never
    caught inside the package.
    """
