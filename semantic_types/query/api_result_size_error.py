class ApiResultSizeError(Exception):
    """Raised when adding a value would make an ApiResult exceed its size limit."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)
