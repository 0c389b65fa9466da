"""Typed failures for the recipe import pipeline.

Every stage raises one of these; the orchestrator converts them into an
``ImportResult`` carrying the error code, HTTP status and caller-facing message.
"""

from typing import Optional

GENERIC_FAILURE_MESSAGE = "Something went wrong while importing this recipe. Please try again later."


class RecipeImportError(Exception):
    error_code = "unexpected"
    status_code = 500
    default_message = GENERIC_FAILURE_MESSAGE

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingUrlError(RecipeImportError):
    error_code = "missing_url"
    status_code = 400
    default_message = "A recipe URL is required."


class InvalidUrlError(RecipeImportError):
    error_code = "invalid_url"
    status_code = 400
    default_message = "That doesn't look like a valid web address."


class DisallowedSchemeError(RecipeImportError):
    error_code = "disallowed_scheme"
    status_code = 400
    default_message = "Only http and https links can be imported."


class DisallowedHostError(RecipeImportError):
    error_code = "disallowed_host"
    status_code = 400
    default_message = "That address can't be imported."


class MissingCredentialError(RecipeImportError):
    error_code = "missing_credential"
    status_code = 500
    default_message = "Recipe import is not configured on this server."


class FetchFailedError(RecipeImportError):
    error_code = "fetch_failed"
    status_code = 400

    def __init__(self, status: Optional[int] = None, message: Optional[str] = None):
        self.status = status
        if message is None:
            if status is not None:
                message = f"Could not fetch the page (HTTP {status})."
            else:
                message = "Could not fetch the page."
        super().__init__(message)


class FetchTimeoutError(RecipeImportError):
    error_code = "fetch_timeout"
    status_code = 400
    default_message = "The website took too long to respond."


class ModelsExhaustedError(RecipeImportError):
    error_code = "models_exhausted"
    status_code = 429
    default_message = "The recipe assistant is busy right now. Please try again in a minute."


class ModelAuthError(RecipeImportError):
    error_code = "model_auth_failed"
    status_code = 401
    default_message = "The recipe assistant rejected our credentials."


class ModelUnavailableError(RecipeImportError):
    error_code = "model_unavailable"
    status_code = 500


class UnparsableOutputError(RecipeImportError):
    error_code = "unparsable_output"
    status_code = 500
    default_message = "We couldn't read the extracted recipe. Please try again."


class IncompleteRecipeError(RecipeImportError):
    error_code = "incomplete_recipe"
    status_code = 400
    default_message = "We couldn't find a complete recipe (title, ingredients and steps) on that page."
