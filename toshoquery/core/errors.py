class ToshoQueryError(Exception):

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class QueryValidationError(ToshoQueryError):
    pass


class UpstreamError(ToshoQueryError):
    pass
