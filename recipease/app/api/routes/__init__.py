from fastapi import APIRouter

from recipease.app.api.routes import recipe_import, recipes

api_router = APIRouter()
api_router.include_router(recipes.router)
api_router.include_router(recipe_import.router)
