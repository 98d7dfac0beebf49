"""Effective permissions API resource."""

import falcon.asgi

from entitygrants.application.use_cases.resolve.resolve_permissions import (
    ResolveEntityPermissionsUseCase,
)
from entitygrants.domain.exceptions import EntityGrantsError
from entitygrants.interfaces.api.errors import require_user, set_error


class EntityPermissionsResource:
    """GET /v1/entities/{entity_type}/{entity_id}/permissions - caller's effective role."""

    def __init__(self, resolve_permissions: ResolveEntityPermissionsUseCase) -> None:
        self._resolve = resolve_permissions

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        entity_type: str,
        entity_id: str,
    ) -> None:
        user = require_user(req, resp)
        if not user:
            return
        try:
            resolved = await self._resolve.execute(user.user_id, entity_type, entity_id)
        except EntityGrantsError as e:
            set_error(resp, e)
            return
        resp.media = resolved.to_dict()
        resp.status = falcon.HTTP_200
