"""Path, operation id, summary and tag naming for routes.

Examples:
  prefix /api + /users + /:id          -> /api/users/{id}
  UserController.getUser               -> operationId UserController.getUser
  getUser                              -> summary "Get user"
  UserProfileController                -> tag "User Profile"
"""

import re

from routing_openapi.metadata.base import Route

_COLON_PARAM = re.compile(r":([A-Za-z0-9_]+)", re.IGNORECASE)


def get_full_path(route: Route) -> str:
    """Return the OpenAPI-formatted path of a route."""
    path = route.options.route_prefix + route.controller.route + route.action.route
    return _COLON_PARAM.sub(r"{\1}", path)


def get_operation_id(route: Route) -> str:
    return f"{route.action.target}.{route.action.method}"


def get_summary(route: Route) -> str:
    """Return a readable summary built from the handler method name."""
    return start_case(route.action.method).capitalize()


def get_tags(route: Route) -> list[str]:
    name = re.sub(r"Controller$", "", route.controller.target)
    return [start_case(name)]


def start_case(text: str) -> str:
    """Split camelCase, snake_case or kebab-case into capitalized words.

    Letters and digits form separate words: get2Users -> Get 2 Users.
    """
    words = []
    for chunk in re.split(r"[\W_]+", text):
        words.extend(_split_words(chunk))
    return " ".join(w[0].upper() + w[1:] for w in words)


def _split_words(chunk: str) -> list[str]:
    words = []
    start = 0
    for i in range(1, len(chunk)):
        prev, cur = chunk[i - 1], chunk[i]
        nxt = chunk[i + 1] if i + 1 < len(chunk) else ""
        if (
            (prev.islower() and cur.isupper())
            or prev.isdigit() != cur.isdigit()
            # end of an acronym: HTMLPage -> HTML Page
            or (prev.isupper() and cur.isupper() and nxt.islower())
        ):
            words.append(chunk[start:i])
            start = i
    if chunk:
        words.append(chunk[start:])
    return words
