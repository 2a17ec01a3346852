"""Route file loader.

Reads route metadata exported from the routing framework as YAML or JSON:

    options:
      routePrefix: /api
    routes:
      - controller: {target: UserController, route: /users, responseType: json}
        action: {target: UserController, method: getUser, httpMethod: get, route: /:id}
        params:
          - {index: 0, name: id, kind: path, primitive: number}

Routes without their own options inherit the file-level ones.
"""

import logging
from pathlib import Path

import yaml

from .base import Route, RouteOptions

logger = logging.getLogger(__name__)


class RouteFileError(ValueError):
    """The route file does not have the expected top-level structure."""


def load_routes(file_path: Path) -> list[Route]:
    """Load a route file into a list of Route."""
    text = file_path.read_text(encoding="utf-8")
    # YAML is a superset of JSON, one parser covers both
    doc = yaml.safe_load(text)

    if not isinstance(doc, dict) or not isinstance(doc.get("routes"), list):
        raise RouteFileError(f"{file_path}: expected a mapping with a 'routes' list")

    options = RouteOptions.model_validate(doc.get("options") or {})

    routes = []
    for item in doc["routes"]:
        route = Route.model_validate(item)
        if "options" not in item:
            route = route.model_copy(update={"options": options})
        routes.append(route)

    logger.debug("Loaded %d route(s) from %s", len(routes), file_path)
    return routes
