from routing_openapi.generator.naming import (
    get_full_path,
    get_operation_id,
    get_summary,
    get_tags,
    start_case,
)
from routing_openapi.metadata.base import ActionMeta, ControllerMeta, Route, RouteOptions


def _make_route(prefix="", controller_route="", action_route="", method="getUser",
                controller="UserController") -> Route:
    return Route(
        controller=ControllerMeta(target=controller, route=controller_route),
        action=ActionMeta(target=controller, method=method, http_method="get", route=action_route),
        options=RouteOptions(route_prefix=prefix),
    )


class TestGetFullPath:
    def test_concatenates_prefix_controller_action(self):
        route = _make_route("/api", "/users", "/:id")
        assert get_full_path(route) == "/api/users/{id}"

    def test_rewrites_every_placeholder_in_order(self):
        route = _make_route("/:tenant", "/users/:user_id", "/posts/:postId2")
        assert get_full_path(route) == "/{tenant}/users/{user_id}/posts/{postId2}"

    def test_no_placeholders(self):
        assert get_full_path(_make_route("", "/health")) == "/health"

    def test_literal_braces_pass_through(self):
        route = _make_route("", "/files", "/{name}")
        assert get_full_path(route) == "/files/{name}"


class TestGetOperationId:
    def test_class_dot_method(self):
        assert get_operation_id(_make_route()) == "UserController.getUser"


class TestGetSummary:
    def test_camel_case(self):
        assert get_summary(_make_route(method="getUser")) == "Get user"

    def test_snake_case(self):
        assert get_summary(_make_route(method="list_all_users")) == "List all users"

    def test_single_word(self):
        assert get_summary(_make_route(method="index")) == "Index"


class TestGetTags:
    def test_strips_controller_suffix(self):
        assert get_tags(_make_route(controller="UserController")) == ["User"]

    def test_multi_word(self):
        assert get_tags(_make_route(controller="UserProfileController")) == ["User Profile"]

    def test_without_suffix(self):
        assert get_tags(_make_route(controller="Health")) == ["Health"]


class TestStartCase:
    def test_acronym(self):
        assert start_case("getHTMLPage") == "Get HTML Page"

    def test_kebab(self):
        assert start_case("list-open-items") == "List Open Items"

    def test_digits_are_separate_words(self):
        assert start_case("get2Users") == "Get 2 Users"
        assert start_case("user2") == "User 2"

    def test_non_ascii_letters_kept(self):
        assert start_case("getÜbersicht") == "Get Übersicht"
        assert start_case("Größe") == "Größe"


class TestNonAsciiNames:
    def test_summary(self):
        assert get_summary(_make_route(method="getÜbersicht")) == "Get übersicht"

    def test_tags(self):
        assert get_tags(_make_route(controller="GrößeController")) == ["Größe"]

    def test_summary_with_digits(self):
        assert get_summary(_make_route(method="get2Users")) == "Get 2 users"
