"""Path and query parameter classification.

Path parameters are first parsed from the path string itself, then refined
with any declared path parameter metadata of the same name. Query parameters
come only from declared metadata.
"""

import re
from typing import Any

from routing_openapi.generator.naming import get_full_path
from routing_openapi.metadata.base import ParamKind, ParamMeta, PrimitiveType, Route, RouteOptions

SCHEMA_REF_PREFIX = "#/components/schemas/"

_PLACEHOLDER = re.compile(r"{([A-Za-z0-9_]+)}", re.IGNORECASE)


def get_path_params(route: Route) -> list[dict[str, Any]]:
    """Return path parameters of a route, in path order."""
    path = get_full_path(route)
    params = []
    for name in _PLACEHOLDER.findall(path):
        param = {
            "in": "path",
            "name": name,
            "required": True,
            "schema": {"type": "string"},
        }
        meta = find_param(route, ParamKind.PATH, name)
        if meta:
            param["required"] = is_required(meta, route.options)
            param["schema"]["type"] = _schema_type(meta)
        params.append(param)
    return params


def get_query_params(route: Route) -> list[dict[str, Any]]:
    """Return query parameters of a route, in declaration order."""
    queries = [
        {
            "in": "query",
            "name": meta.name or "",
            "required": is_required(meta, route.options),
            "schema": {"type": _schema_type(meta)},
        }
        for meta in route.params
        if meta.kind == ParamKind.QUERY
    ]

    queries_meta = find_param(route, ParamKind.QUERIES)
    if queries_meta:
        queries.append({
            "in": "query",
            "name": queries_meta.type_name,
            "required": is_required(queries_meta, route.options),
            "schema": make_ref(queries_meta.type_name),
        })

    return queries


def is_required(meta: ParamMeta, options: RouteOptions) -> bool:
    """Resolve required-ness, falling back to the global default.

    With a global required default, a parameter is required unless it says
    required=False. Without one, only an explicit required=True counts.
    """
    if options.defaults.param_options.required:
        return meta.required is not False
    return meta.required is True


def make_ref(schema_name: str) -> dict[str, str]:
    """Return a reference object pointing to a named component schema."""
    return {"$ref": SCHEMA_REF_PREFIX + schema_name}


def find_param(route: Route, kind: ParamKind, name: str | None = None) -> ParamMeta | None:
    for meta in route.params:
        if meta.kind == kind and (name is None or meta.name == name):
            return meta
    return None


def _schema_type(meta: ParamMeta) -> str:
    # only numbers are told apart from strings
    return "number" if meta.primitive == PrimitiveType.NUMBER else "string"
