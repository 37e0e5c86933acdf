from fastapi import HTTPException, status
from services.errors import (
    AssociationClearError, HasChildrenError, MenuError, NotFoundError,
    StoreError
)


STATUS_BY_ERROR = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    HasChildrenError: status.HTTP_409_CONFLICT,
    AssociationClearError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    StoreError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def to_http_exception(error: MenuError) -> HTTPException:
    """Translate a classified service error into the HTTP error returned to clients."""
    status_code = STATUS_BY_ERROR.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(
        status_code=status_code,
        detail={"code": error.code, "message": error.message}
    )
