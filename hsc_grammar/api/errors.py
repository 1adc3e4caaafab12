from fastapi import HTTPException, status


class ServiceUnavailableError(HTTPException):  # type: ignore
    def __init__(self, detail: str = 'Service Unavailable'):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=detail
        )
