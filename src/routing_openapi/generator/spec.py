"""Operation, paths and document assembly.

Each route becomes a {path: {method: operation}} fragment. Fragments are
deep-merged in route order, so routes sharing a path end up side by side
and a repeated path + method is merged over the earlier operation.
"""

import copy
import logging
from typing import Any

from routing_openapi.generator.content import get_request_body, get_responses
from routing_openapi.generator.naming import get_full_path, get_operation_id, get_summary, get_tags
from routing_openapi.generator.params import get_path_params, get_query_params
from routing_openapi.metadata.base import Route

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.0.0"
DEFAULT_INFO_VERSION = "1.0.0"


def get_operation(route: Route) -> dict[str, Any]:
    """Return the OpenAPI operation object of a route."""
    operation = {
        "operationId": get_operation_id(route),
        "parameters": [*get_path_params(route), *get_query_params(route)],
        "requestBody": get_request_body(route),
        "responses": get_responses(route),
        "summary": get_summary(route),
        "tags": get_tags(route),
    }
    # drop empty and missing fields
    return {key: value for key, value in operation.items() if value}


def get_paths(routes: list[Route]) -> dict[str, Any]:
    """Return the merged OpenAPI paths object of the given routes."""
    paths: dict[str, Any] = {}
    for route in routes:
        path = get_full_path(route)
        method = route.action.http_method
        if method in paths.get(path, {}):
            logger.debug("Merging %s %s over an earlier route", method.upper(), path)
        deep_merge(paths, {path: {method: get_operation(route)}})
    logger.debug("Built %d path(s) from %d route(s)", len(paths), len(routes))
    return paths


def get_spec(routes: list[Route]) -> dict[str, Any]:
    """Return the OpenAPI document for the given routes."""
    return {
        "components": {"schemas": {}},
        "info": {"title": "", "version": DEFAULT_INFO_VERSION},
        "openapi": OPENAPI_VERSION,
        "paths": get_paths(routes),
    }


def deep_merge(target: Any, source: Any) -> Any:
    """Merge source into target in place and return target.

    Dicts are merged key by key and lists index by index; any other source
    value replaces what target held. Source values are copied, never shared.
    """
    if isinstance(target, dict) and isinstance(source, dict):
        for key, value in source.items():
            if key in target:
                target[key] = deep_merge(target[key], value)
            else:
                target[key] = copy.deepcopy(value)
        return target
    if isinstance(target, list) and isinstance(source, list):
        for i, value in enumerate(source):
            if i < len(target):
                target[i] = deep_merge(target[i], value)
            else:
                target.append(copy.deepcopy(value))
        return target
    return copy.deepcopy(source)
