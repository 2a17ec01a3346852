"""Route descriptor models.

The routing framework registers controllers, actions, parameters and
response handlers through decorators. These models carry that metadata
into the OpenAPI generator. Field names are snake_case; the camelCase
names the framework exports (routePrefix, httpMethod, ...) are accepted
as aliases when loading from files.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class _Meta(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ParamKind(str, Enum):
    PATH = "path"
    QUERY = "query"
    QUERIES = "queries"  # one object bundling several query fields
    BODY = "body"


class PrimitiveType(str, Enum):
    """Declared type tag of a parameter, set at registration time."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    OBJECT = "object"


class ResponseHandlerKind(str, Enum):
    CONTENT_TYPE = "content-type"
    SUCCESS_CODE = "success-code"


class ParamOptions(_Meta):
    required: bool = False


class RouteDefaults(_Meta):
    param_options: ParamOptions = Field(default_factory=ParamOptions)


class RouteOptions(_Meta):
    """Options the routing framework was configured with."""

    route_prefix: str = ""
    defaults: RouteDefaults = Field(default_factory=RouteDefaults)


class ControllerMeta(_Meta):
    """A controller class and its route segment."""

    target: str  # declaring class name
    route: str = ""
    response_type: str = ""  # "json" for JSON controllers


class ActionMeta(_Meta):
    """A single handler method on a controller."""

    target: str
    method: str
    http_method: str  # get / post / put / delete / patch
    route: str = ""

    @field_validator("http_method")
    @classmethod
    def _lower_http_method(cls, value: str) -> str:
        return value.lower()


class ParamMeta(_Meta):
    """A declared handler parameter."""

    index: int = 0
    name: str | None = None
    kind: ParamKind
    required: bool | None = None
    primitive: PrimitiveType = PrimitiveType.STRING
    type_name: str = "Object"  # used for $ref pointers


class ResponseHandlerMeta(_Meta):
    kind: ResponseHandlerKind
    value: str | int


class Route(_Meta):
    """One registered endpoint with everything the framework knows about it."""

    controller: ControllerMeta
    action: ActionMeta
    params: list[ParamMeta] = []
    response_handlers: list[ResponseHandlerMeta] = []
    options: RouteOptions = Field(default_factory=RouteOptions)
