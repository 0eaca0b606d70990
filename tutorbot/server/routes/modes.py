"""GET /modes endpoint handler."""
from fastapi import APIRouter, status

from tutorbot.prompts import MODE_DESCRIPTIONS, SYSTEM_PROMPTS
from tutorbot.server.models.responses import ModesResponse


def create_modes_router() -> APIRouter:
    router = APIRouter()

    @router.get("/modes", response_model=ModesResponse, status_code=status.HTTP_200_OK, tags=["prompts"])
    async def list_modes() -> ModesResponse:
        """List the available prompt modes."""
        return ModesResponse(modes=list(SYSTEM_PROMPTS), descriptions=dict(MODE_DESCRIPTIONS))

    return router
