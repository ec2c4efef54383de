class SingularSystemWarning(RuntimeWarning):
    """Emitted when a tridiagonal solve hits a zero pivot and returns non-finite values."""

    pass
