"""Error taxonomy shared by the resolver, the predicates and the routes.

Each error is an ``HTTPException`` so FastAPI renders it as ``{"detail": ...}``
with the matching status code without any extra handler.
"""
from typing import Optional

from fastapi import HTTPException, status


class ProMaError(HTTPException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal error"

    def __init__(self, detail: Optional[str] = None):
        super().__init__(status_code=self.status_code, detail=detail or self.default_detail)


class BadRequestError(ProMaError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad Request"


class UnauthorizedError(ProMaError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized"


class NotFoundError(ProMaError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not Found"
