class NoDefaultTypeError(LookupError):
    """Raised when asking for the default type of a storage kind that has none (NOTYPE, ERROR).
    This is a programming error: callers must never box values of these kinds generically."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)
