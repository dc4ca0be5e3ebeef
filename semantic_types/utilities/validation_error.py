class ValidationError(Exception):
    """Exception raised when a user value cannot be parsed by a data value handler.
    NOTE: Messages in these errors should be shareable to the user, they end up next to the annotation
    that produced them. """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)
