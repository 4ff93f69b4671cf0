from lrukit.callbacks import CallbackManager


def _recording_manager():
    events = []
    manager = CallbackManager()
    manager.hit_callback(lambda k, v: events.append(("hit", k, v)))
    manager.miss_callback(lambda k: events.append(("miss", k)))
    manager.access_callback(lambda k, was_hit: events.append(("access", k, was_hit)))
    return manager, events


def test_hit_calls_hit_then_access_callbacks():
    manager, events = _recording_manager()
    manager.hit("key", "value")
    assert events == [("hit", "key", "value"), ("access", "key", True)]


def test_miss_calls_miss_then_access_callbacks():
    manager, events = _recording_manager()
    manager.miss("key")
    assert events == [("miss", "key"), ("access", "key", False)]


def test_callbacks_run_in_registration_order():
    manager = CallbackManager()
    order = []
    manager.hit_callback(lambda k, v: order.append("first"))
    manager.hit_callback(lambda k, v: order.append("second"))
    manager.hit(1, 2)
    assert order == ["first", "second"]


def test_registered_callbacks_are_listed():
    manager = CallbackManager()

    def on_hit(key, value):
        pass

    def on_miss(key):
        pass

    def on_access(key, was_hit):
        pass

    manager.hit_callback(on_hit)
    manager.miss_callback(on_miss)
    manager.access_callback(on_access)
    assert manager.hit_callbacks() == (on_hit,)
    assert manager.miss_callbacks() == (on_miss,)
    assert manager.access_callbacks() == (on_access,)


def test_clear_individual_kinds():
    manager, events = _recording_manager()
    manager.clear_hit_callbacks()
    manager.hit("a", 1)
    assert events == [("access", "a", True)]

    events.clear()
    manager.clear_miss_callbacks()
    manager.miss("b")
    assert events == [("access", "b", False)]

    events.clear()
    manager.clear_access_callbacks()
    manager.miss("c")
    assert events == []
    assert manager.access_callbacks() == ()


def test_clear_removes_everything():
    manager, events = _recording_manager()
    manager.clear()
    manager.hit("a", 1)
    manager.miss("b")
    assert events == []
    assert manager.hit_callbacks() == ()
    assert manager.miss_callbacks() == ()