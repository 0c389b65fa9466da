from recipease.app.schemas.recipe import RecipeCreate
from recipease.app.services import recipes_service


def recipe_payload(**overrides):
    payload = {
        "title": "Test Recipe",
        "description": "Tasty",
        "imageUrl": "https://cdn.example.com/test.jpg",
        "tags": ["baking"],
        "ingredients": ["1 cup flour", "2 eggs"],
        "steps": ["Mix", "Bake"],
    }
    payload.update(overrides)
    return payload


def test_create_and_get_recipe(client, auth_headers):
    response = client.post("/recipes", json=recipe_payload(), headers=auth_headers)
    assert response.status_code == 201
    body = response.json()
    assert body["userId"] == "user-1"
    assert body["title"] == "Test Recipe"
    assert body["imageUrl"] == "https://cdn.example.com/test.jpg"
    assert body["ingredients"] == ["1 cup flour", "2 eggs"]

    fetched = client.get(f"/recipes/{body['id']}", headers=auth_headers)
    assert fetched.status_code == 200
    assert fetched.json()["steps"] == ["Mix", "Bake"]


def test_imported_recipe_can_be_saved_as_is(client, auth_headers):
    imported = {
        "title": "Lemon Pasta",
        "description": "Bright and quick.",
        "imageUrl": None,
        "tags": ["pasta", "quick"],
        "ingredients": ["200 g spaghetti"],
        "steps": ["Cook the pasta."],
    }
    response = client.post("/recipes", json=imported, headers=auth_headers)
    assert response.status_code == 201
    assert response.json()["tags"] == ["pasta", "quick"]


def test_create_requires_ingredients_and_steps(client, auth_headers):
    response = client.post("/recipes", json=recipe_payload(ingredients=[]), headers=auth_headers)
    assert response.status_code == 422

    response = client.post("/recipes", json=recipe_payload(steps=["   "]), headers=auth_headers)
    assert response.status_code == 422

    response = client.post("/recipes", json=recipe_payload(title=""), headers=auth_headers)
    assert response.status_code == 422


def test_list_and_recent_newest_first(client, db_session, auth_headers):
    for i in range(25):
        recipes_service.create_recipe(db_session, "user-2", RecipeCreate(**recipe_payload(title=f"Recipe {i}")))

    all_response = client.get("/recipes", headers=auth_headers)
    assert all_response.status_code == 200
    assert len(all_response.json()) == 25

    recent = client.get("/recipes/recent", headers=auth_headers).json()
    assert len(recent) == 20
    assert recent[0]["title"] == "Recipe 24"


def test_missing_recipe_is_404(client, auth_headers):
    response = client.get("/recipes/9999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["detail"] == "Recipe not found"
