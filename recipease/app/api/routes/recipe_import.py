import logging
from typing import Any

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from recipease.app.api.deps import get_current_user
from recipease.app.schemas.auth import CurrentUser
from recipease.app.services import recipe_import_service
from recipease.app.services.url_parsing.models import ImportedRecipe, ImportRecipeRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["import"])


def _requested_url(payload: Any) -> Any:
    # Any JSON body is accepted; only an object can carry a url
    if not isinstance(payload, dict):
        return None
    return ImportRecipeRequest.model_validate(payload).url


@router.post("/import-recipe", response_model=ImportedRecipe)
async def import_recipe(
    payload: Any = Body(None),
    current_user: CurrentUser = Depends(get_current_user),
):
    url = _requested_url(payload)
    logger.info("User %s importing recipe from %s", current_user.id, url)
    result = await recipe_import_service.import_recipe(url)
    if not result.success:
        return JSONResponse(
            status_code=result.status_code,
            content={"message": result.error_message, "error_code": result.error_code},
        )
    return result.recipe
