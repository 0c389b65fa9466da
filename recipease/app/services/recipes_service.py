from typing import List

from fastapi import HTTPException, status
from sqlalchemy import select
from sqlalchemy.orm import Session

from recipease.app.db import models
from recipease.app.schemas.recipe import RecipeCreate


def _ensure_user(db: Session, user_id: str, username: str | None = None) -> models.User:
    user = db.get(models.User, user_id)
    if user is None:
        user = models.User(user_id=user_id, username=username)
        db.add(user)
        db.flush()
    return user


def create_recipe(db: Session, user_id: str, data: RecipeCreate, username: str | None = None) -> models.Recipe:
    user_id_str = str(user_id)
    _ensure_user(db, user_id_str, username)
    recipe = models.Recipe(
        user_id=user_id_str,
        title=data.title,
        description=data.description,
        image_url=data.image_url,
        source_url=data.source_url,
        tags=list(data.tags),
        ingredients=list(data.ingredients),
        steps=list(data.steps),
    )
    db.add(recipe)
    db.commit()
    db.refresh(recipe)
    return recipe


def list_recipes(db: Session) -> List[models.Recipe]:
    stmt = select(models.Recipe).order_by(models.Recipe.created_at.desc(), models.Recipe.id.desc())
    return list(db.scalars(stmt).all())


def list_recent_recipes(db: Session, limit: int = 20) -> List[models.Recipe]:
    stmt = (
        select(models.Recipe)
        .order_by(models.Recipe.created_at.desc(), models.Recipe.id.desc())
        .limit(limit)
    )
    return list(db.scalars(stmt).all())


def get_recipe(db: Session, recipe_id: int) -> models.Recipe:
    recipe = db.get(models.Recipe, recipe_id)
    if not recipe:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
    return recipe
