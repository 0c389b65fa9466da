from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from recipease.app.api.deps import get_current_user, get_db_session
from recipease.app.schemas.auth import CurrentUser
from recipease.app.schemas.recipe import RecipeCreate, RecipeRead
from recipease.app.services import recipes_service

router = APIRouter(prefix="/recipes", tags=["recipes"])

RECENT_LIMIT = 20


@router.post("", response_model=RecipeRead, status_code=status.HTTP_201_CREATED)
def create_recipe(
    payload: RecipeCreate,
    db: Session = Depends(get_db_session),
    current_user: CurrentUser = Depends(get_current_user),
):
    return recipes_service.create_recipe(db, current_user.id, payload, username=current_user.username)


@router.get("", response_model=list[RecipeRead])
def list_recipes(
    db: Session = Depends(get_db_session),
    current_user: CurrentUser = Depends(get_current_user),
):
    return recipes_service.list_recipes(db)


@router.get("/recent", response_model=list[RecipeRead])
def list_recent_recipes(
    db: Session = Depends(get_db_session),
    current_user: CurrentUser = Depends(get_current_user),
):
    return recipes_service.list_recent_recipes(db, RECENT_LIMIT)


@router.get("/{recipe_id}", response_model=RecipeRead)
def get_recipe(
    recipe_id: int,
    db: Session = Depends(get_db_session),
    current_user: CurrentUser = Depends(get_current_user),
):
    return recipes_service.get_recipe(db, recipe_id)
