class SetupError(Exception):
    """Exception raised when the data type registry cannot be configured or initialized."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)
