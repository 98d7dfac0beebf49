"""Domain error to HTTP response mapping."""

import falcon
import falcon.asgi

from entitygrants.domain.exceptions import (
    EntityGrantsError,
    EntityNotFound,
    FeatureDisabled,
    GrantNotFound,
    InvalidRole,
    NotProjectOwner,
    SubjectNotEligible,
    ValidationError,
)

_STATUS = {
    FeatureDisabled: falcon.HTTP_503,
    EntityNotFound: falcon.HTTP_404,
    GrantNotFound: falcon.HTTP_404,
    NotProjectOwner: falcon.HTTP_403,
    InvalidRole: falcon.HTTP_422,
    SubjectNotEligible: falcon.HTTP_422,
    ValidationError: falcon.HTTP_400,
}


def set_error(resp: falcon.asgi.Response, exc: EntityGrantsError) -> None:
    """Write status and body for a domain error. Unknown kinds map to 500."""
    for exc_type, status in _STATUS.items():
        if isinstance(exc, exc_type):
            resp.status = status
            break
    else:
        resp.status = falcon.HTTP_500
    resp.media = {"error": type(exc).__name__, "message": str(exc)}


def require_user(req: falcon.asgi.Request, resp: falcon.asgi.Response):
    """Return request user, or set 401 and return None."""
    user = getattr(req.context, "user", None)
    if not user:
        resp.status = falcon.HTTP_401
        resp.media = {"error": "Unauthorized"}
    return user
