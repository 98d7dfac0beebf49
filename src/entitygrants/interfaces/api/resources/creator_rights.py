"""Creator rights API resource."""

import falcon.asgi

from entitygrants.application.use_cases.creator_rights.restore_creator_rights import (
    RestoreCreatorRightsUseCase,
)
from entitygrants.application.use_cases.creator_rights.revoke_creator_rights import (
    RevokeCreatorRightsUseCase,
)
from entitygrants.domain.exceptions import EntityGrantsError
from entitygrants.interfaces.api.errors import require_user, set_error


class CreatorRightsResource:
    """PUT/DELETE /v1/entities/{entity_type}/{entity_id}/creator-rights/{user_id}.

    PUT records a revocation, DELETE removes it and restores the creator's rights.
    """

    def __init__(
        self,
        revoke_creator_rights: RevokeCreatorRightsUseCase,
        restore_creator_rights: RestoreCreatorRightsUseCase,
    ) -> None:
        self._revoke = revoke_creator_rights
        self._restore = restore_creator_rights

    async def on_put(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        entity_type: str,
        entity_id: str,
        user_id: str,
    ) -> None:
        actor = require_user(req, resp)
        if not actor:
            return
        try:
            revocation = await self._revoke.execute(
                entity_type, entity_id, user_id, actor.user_id
            )
        except EntityGrantsError as e:
            set_error(resp, e)
            return
        resp.media = revocation.to_dict()
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        entity_type: str,
        entity_id: str,
        user_id: str,
    ) -> None:
        actor = require_user(req, resp)
        if not actor:
            return
        try:
            removed = await self._restore.execute(
                entity_type, entity_id, user_id, actor.user_id
            )
        except EntityGrantsError as e:
            set_error(resp, e)
            return
        resp.media = {"restored": removed}
        resp.status = falcon.HTTP_200
