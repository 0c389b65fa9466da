import json

import pytest
from fastapi.exceptions import RequestValidationError

from recipease.app.main import validation_exception_handler


@pytest.mark.asyncio
async def test_validation_handler_formats_errors():
    exc = RequestValidationError(
        errors=[
            {"loc": ("body", "title"), "msg": "field required"},
            {"loc": ("path", "recipe_id"), "msg": "value is not a valid integer"},
        ]
    )
    response = await validation_exception_handler(None, exc)
    assert response.status_code == 422
    body = json.loads(response.body)
    assert body["error_code"] == "validation_error"
    assert body["message"] == "Invalid request payload."
    assert body["request_id"]
    assert {"field": "body.title", "message": "field required"} in body["details"]
    assert {"field": "path.recipe_id", "message": "value is not a valid integer"} in body["details"]
