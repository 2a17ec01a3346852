"""Request body and response derivation."""

from typing import Any

from routing_openapi.generator.params import find_param, is_required, make_ref
from routing_openapi.metadata.base import ParamKind, ResponseHandlerKind, Route

JSON_CONTENT_TYPE = "application/json"
HTML_CONTENT_TYPE = "text/html; charset=utf-8"


def get_request_body(route: Route) -> dict[str, Any] | None:
    """Return the request body of a route, or None if it declares no body."""
    meta = find_param(route, ParamKind.BODY)
    if not meta:
        return None
    return {
        "content": {JSON_CONTENT_TYPE: {"schema": make_ref(meta.type_name)}},
        "description": meta.type_name,
        "required": is_required(meta, route.options),
    }


def get_responses(route: Route) -> dict[str, Any]:
    """Return the responses object of a route, always holding one entry."""
    if route.controller.response_type == "json":
        content_type = JSON_CONTENT_TYPE
    else:
        content_type = HTML_CONTENT_TYPE

    content_meta = _find_handler(route, ResponseHandlerKind.CONTENT_TYPE)
    if content_meta:
        content_type = str(content_meta.value)

    success_meta = _find_handler(route, ResponseHandlerKind.SUCCESS_CODE)
    status = str(success_meta.value) if success_meta else "200"

    return {
        status: {
            "content": {content_type: {}},
            "description": "Successful response",
        }
    }


def _find_handler(route: Route, kind: ResponseHandlerKind):
    return next((h for h in route.response_handlers if h.kind == kind), None)
