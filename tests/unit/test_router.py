"""
Unit tests for the router (event registry).
"""

import threading

import pytest

from eventroute import Event, HTTPStatus, Request, Router, StaticEvent
from eventroute.routing.registry import NOT_FOUND_PATH


def make_request(method: str, path: str, **kwargs) -> Request:
    """Helper to create a request for testing."""
    return Request(method=method, path=path, **kwargs)


def dummy_handler(context):
    """Dummy handler for testing."""
    return context.request.path


class TestRegistry:
    """Tests for registering and resetting events."""

    def test_register(self, router):
        """Test registering events keeps them in order."""
        first = Event("GET", "/users", dummy_handler, router=router)
        second = Event("POST", "/users", dummy_handler, router=router)

        assert router.events == (first, second)
        assert first.registered and second.registered
        assert len(router) == 2

    def test_register_false_leaves_registry_alone(self, router):
        """Test detached events are not registered."""
        event = Event("GET", "/users", dummy_handler, router=router, register=False)

        assert router.events == ()
        assert event.registered is False

    def test_register_allows_duplicates(self, router):
        """Test no duplicate detection happens."""
        Event("GET", "/users", dummy_handler, router=router)
        Event("GET", "/users", dummy_handler, router=router)

        assert len(router.events) == 2

    def test_event_belongs_to_one_router(self, router):
        """Test a registered event cannot be registered on a second router."""
        event = Event("GET", "/users", dummy_handler, router=router)
        other = Router(install_default_filters=False)

        with pytest.raises(ValueError):
            other.register(event)

        assert event.router is router
        assert other.events == ()

    def test_reset_event_can_move(self, router):
        """Test an event freed by reset can join another router."""
        event = Event("GET", "/users", dummy_handler, router=router)
        router.reset()
        other = Router(install_default_filters=False)

        other.register(event)

        assert event.router is other
        assert other.events == (event,)

    def test_verb_is_normalized(self, router):
        """Test verbs are upper-cased."""
        event = Event("post", "/users", dummy_handler, router=router)
        assert event.verb == "POST"

    def test_unknown_verb(self, router):
        """Test unknown verbs are rejected at registration."""
        with pytest.raises(ValueError):
            Event("FETCH", "/users", dummy_handler, router=router)

    def test_reset(self, router):
        """Test reset clears every event."""
        event = Event("GET", "/users", dummy_handler, router=router)
        router.reset()

        assert router.events == ()
        assert event.registered is False

    def test_reset_keeps_filters(self, router):
        """Test reset leaves the after-filter chain alone."""
        router.after_attend(lambda context: None)
        router.reset()

        assert len(router.filters) == 1

    def test_concurrent_registration(self, router):
        """Test registrations from several threads are all kept."""
        def register_many(prefix):
            for i in range(50):
                Event("GET", f"/{prefix}/{i}", dummy_handler, router=router)

        threads = [
            threading.Thread(target=register_many, args=(f"t{n}",))
            for n in range(4)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(router.events) == 200


class TestLookup:
    """Tests for Router.lookup."""

    def test_match_static_path(self, router):
        """Test matching literal paths."""
        users = Event("GET", "/users", dummy_handler, router=router)
        posts = Event("GET", "/posts", dummy_handler, router=router)

        assert router.lookup("GET", "/users") is users
        assert router.lookup("GET", "/posts") is posts

    def test_match_with_method(self, router):
        """Test method-based routing."""
        get = Event("GET", "/users", dummy_handler, router=router)
        post = Event("POST", "/users", dummy_handler, router=router)

        assert router.lookup("GET", "/users") is get
        assert router.lookup("post", "/users") is post

    def test_first_match_wins(self, router):
        """Test earlier registrations take priority."""
        me = Event("GET", "/users/me", dummy_handler, router=router)
        by_id = Event("GET", "/users/:id", dummy_handler, router=router)

        assert router.lookup("GET", "/users/me") is me
        assert router.lookup("GET", "/users/42") is by_id

    def test_first_match_wins_for_identical_routes(self, router):
        """Test the first of two identical routes answers."""
        first = Event("GET", "/users/:id", dummy_handler, router=router)
        Event("GET", "/users/:id", dummy_handler, router=router)

        assert router.lookup("GET", "/users/1") is first

    def test_lookup_does_not_reorder(self, router):
        """Test lookups leave registration order untouched."""
        events = [
            Event("GET", "/a", dummy_handler, router=router),
            Event("GET", "/b", dummy_handler, router=router),
        ]
        router.lookup("GET", "/b")

        assert list(router.events) == events

    def test_find_returns_none(self, router):
        """Test find() has no fallback."""
        Event("GET", "/users", dummy_handler, router=router)
        assert router.find("GET", "/posts") is None

    def test_not_found_fallback(self, router):
        """Test an unmatched GET gets the built-in not-found event."""
        Event("GET", "/users", dummy_handler, router=router)

        event = router.lookup("GET", "/posts")

        assert event not in router.events
        assert event.registered is False
        assert router.dispatch(make_request("GET", "/posts")).context.status == 404

    @pytest.mark.parametrize("verb", ["POST", "PUT", "DELETE", "PATCH"])
    def test_not_found_for_other_verbs(self, router, verb):
        """Test unmatched non-GET requests also get the 404 fallback."""
        Event("GET", "/users", dummy_handler, router=router)

        context, error = router.dispatch(make_request(verb, "/users"))

        assert context.status == HTTPStatus.NOT_FOUND
        assert error is None

    def test_lookup_after_reset(self, router):
        """Test previously registered routes fall back to not-found after reset."""
        event = Event("GET", "/users", dummy_handler, router=router)
        router.reset()

        assert router.lookup("GET", "/users") is not event
        assert router.dispatch(make_request("GET", "/users")).context.status == 404


class TestNotFound:
    """Tests for the not-found fallback."""

    def test_builtin_not_found_page(self, router):
        """Test the built-in not-found page."""
        context, _ = router.dispatch(make_request("GET", "/missing"))

        assert context.status == HTTPStatus.NOT_FOUND
        assert "Not Found" in context.body

    def test_builtin_index_page(self, router):
        """Test GET / without a route shows the default index page."""
        context, _ = router.dispatch(make_request("GET", "/"))

        assert context.status == HTTPStatus.NOT_FOUND
        assert "It works!" in context.body

    def test_post_root_shows_not_found_page(self, router):
        """Test only GET / shows the index page."""
        context, _ = router.dispatch(make_request("POST", "/"))

        assert "Not Found" in context.body
        assert "It works!" not in context.body

    def test_custom_not_found(self, router):
        """Test a GET '404' event overrides the built-in page."""
        @router.get(NOT_FOUND_PATH)
        def custom(context):
            context.status = 404
            return f"Nothing at {context.request.path}"

        context, _ = router.dispatch(make_request("GET", "/nowhere"))

        assert context.status == 404
        assert context.body == "Nothing at /nowhere"

    def test_custom_not_found_for_every_unmatched_request(self, router):
        """Test the custom event answers all unmatched requests."""
        custom = Event("GET", "404", dummy_handler, router=router)

        assert router.lookup("GET", "/a") is custom
        assert router.lookup("GET", "/b/c") is custom
        assert router.lookup("DELETE", "/a") is custom

    def test_catch_all_is_not_the_not_found_event(self, router):
        """Test a catch-all GET route is not mistaken for the '404' event."""
        Event("POST", "/:page", dummy_handler, router=router)
        catch_all = Event("GET", "/:page", dummy_handler, router=router)

        event = router.lookup("DELETE", "/anything")

        assert event is not catch_all
        assert event.registered is False


class TestDecorators:
    """Tests for decorator-style registration."""

    def test_get_decorator(self, router):
        """Test @router.get registers a GET event."""
        @router.get("/test")
        def handler(context):
            return "test"

        assert router.events[0].verb == "GET"
        assert router.events[0].action is handler

    @pytest.mark.parametrize(
        "method", ["post", "put", "delete", "patch", "head", "options"]
    )
    def test_verb_decorators(self, router, method):
        """Test every verb decorator registers its verb."""
        getattr(router, method)("/test")(dummy_handler)
        assert router.events[0].verb == method.upper()

    def test_decorator_returns_handler(self, router):
        """Test decorators return the handler unchanged."""
        decorated = router.get("/test")(dummy_handler)
        assert decorated is dummy_handler

    @pytest.mark.parametrize("verb", ["get", "post", "put", "delete", "patch", "head", "options"])
    def test_verb_helpers_documented(self, verb):
        """Test every verb helper names its verb in its docstring."""
        assert verb.upper() in getattr(Router, verb).__doc__

    def test_static(self, router, public_dir):
        """Test router.static registers a static event."""
        event = router.static("/static", public_dir)

        assert isinstance(event, StaticEvent)
        assert router.events == (event,)

    def test_url_for(self, router):
        """Test URL generation for named events."""
        router.get("/users/:id/posts/:post_id", name="user_post")(dummy_handler)

        assert router.url_for("user_post", id="123", post_id="456") == "/users/123/posts/456"
        assert router.url_for("nonexistent") is None

    def test_describe(self, router):
        """Test the debugging table lists events."""
        router.get("/users")(dummy_handler)
        router.post("/users")(dummy_handler)

        table = router.describe()
        assert "GET" in table and "POST" in table
        assert table.count("/users") == 2


class TestRouterConfig:
    """Tests for configuration handling in the router."""

    def test_invalid_config_rejected(self):
        """Test the router validates its configuration."""
        from eventroute import RouterConfig

        with pytest.raises(ValueError):
            Router(RouterConfig(static_chunk_size=0))

    def test_default_filters_installed(self):
        """Test a router starts with log_event."""
        from eventroute import log_event

        assert log_event in Router().filters
