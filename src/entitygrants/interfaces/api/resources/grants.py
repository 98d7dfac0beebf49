"""Entity grant API resources."""

import falcon.asgi

from entitygrants.application.use_cases.grants.grant_permission import (
    GrantEntityPermissionUseCase,
)
from entitygrants.application.use_cases.grants.list_grants import ListEntityGrantsUseCase
from entitygrants.application.use_cases.grants.revoke_permission import (
    RevokeEntityPermissionUseCase,
)
from entitygrants.domain.exceptions import EntityGrantsError
from entitygrants.interfaces.api.errors import require_user, set_error


class EntityGrantsResource:
    """GET/POST /v1/entities/{entity_type}/{entity_id}/grants - list and grant."""

    def __init__(
        self,
        list_grants: ListEntityGrantsUseCase,
        grant_permission: GrantEntityPermissionUseCase,
    ) -> None:
        self._list = list_grants
        self._grant = grant_permission

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        entity_type: str,
        entity_id: str,
    ) -> None:
        """List all grants on entity, active and revoked."""
        if not require_user(req, resp):
            return
        try:
            grants = await self._list.execute(entity_type, entity_id)
        except EntityGrantsError as e:
            set_error(resp, e)
            return
        resp.media = {"items": [g.to_dict() for g in grants]}
        resp.status = falcon.HTTP_200

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        entity_type: str,
        entity_id: str,
    ) -> None:
        """Grant role on entity to a user or group."""
        user = require_user(req, resp)
        if not user:
            return

        try:
            body = await req.get_media()
            subject_type = body["subject_type"]
            subject_id = body["subject_id"]
            role = body["role"]
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except (TypeError, falcon.MediaMalformedError):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid request body"}
            return

        try:
            grant = await self._grant.execute(
                entity_type, entity_id, subject_type, subject_id, role, user.user_id
            )
        except EntityGrantsError as e:
            set_error(resp, e)
            return
        resp.media = grant.to_dict()
        resp.status = falcon.HTTP_201


class GrantResource:
    """DELETE /v1/grants/{grant_id} - revoke grant."""

    def __init__(self, revoke_permission: RevokeEntityPermissionUseCase) -> None:
        self._revoke = revoke_permission

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        grant_id: str,
    ) -> None:
        user = require_user(req, resp)
        if not user:
            return
        try:
            grant = await self._revoke.execute(grant_id, user.user_id)
        except EntityGrantsError as e:
            set_error(resp, e)
            return
        resp.media = grant.to_dict()
        resp.status = falcon.HTTP_200
