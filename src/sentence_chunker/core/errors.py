class InvalidBoundsError(ValueError):
    """Raised when min_length/max_length cannot describe a valid length window."""

    pass


def validate_bounds(min_length: int, max_length: int) -> None:
    """Reject bounds that would make the split window meaningless."""
    if min_length < 0:
        raise InvalidBoundsError(f"min_length must be >= 0, got {min_length}")
    if max_length < 1:
        raise InvalidBoundsError(f"max_length must be >= 1, got {max_length}")
    if min_length > max_length:
        raise InvalidBoundsError(
            f"min_length ({min_length}) must not exceed max_length ({max_length})"
        )
