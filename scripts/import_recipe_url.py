#!/usr/bin/env python
"""
Run the recipe import pipeline for a single URL and print the result as JSON.

Useful for checking how a site behaves without going through the API:
    python scripts/import_recipe_url.py https://example.com/some-recipe
"""
import argparse
import asyncio
import json
import logging
import sys

from recipease.app.services import recipe_import_service

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("import_recipe_url")


def main() -> int:
    parser = argparse.ArgumentParser(description="Import a recipe from a web page.")
    parser.add_argument("url", help="Recipe page URL")
    args = parser.parse_args()

    result = asyncio.run(recipe_import_service.import_recipe(args.url))
    if not result.success:
        logger.error("Import failed (%s): %s", result.error_code, result.error_message)
        print(json.dumps(result.model_dump(exclude={"recipe"}), indent=2))
        return 1

    print(json.dumps(result.recipe.model_dump(by_alias=True), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
