class InvariantViolation(Exception):
    """Raised when content would break a data-model invariant."""
