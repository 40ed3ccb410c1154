class InvalidCoordinate(ValueError):
    """Raised when a coordinate or distance threshold is not usable."""
