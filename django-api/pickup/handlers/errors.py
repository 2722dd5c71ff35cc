"""Map domain errors to HTTP responses.

Configured as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Only the error code and
the user-safe message are exposed.
"""

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from pickup.domain.errors import DomainError, ErrorKind

_STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID: status.HTTP_400_BAD_REQUEST,
    ErrorKind.UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        return Response(
            {"code": exc.code.value, "message": exc.message},
            status=_STATUS_BY_KIND[exc.kind],
        )
    return exception_handler(exc, context)
