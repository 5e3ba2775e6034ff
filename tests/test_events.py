from mcml.events import add_stop_handler, invoke_stop


def test_add_stop_handler():
    called = []
    add_stop_handler(lambda: called.append(True))
    invoke_stop()
    assert called == [True]


def test_multiple_stop_handlers():
    first_calls = []
    second_calls = []
    add_stop_handler(lambda: first_calls.append(1))
    add_stop_handler(lambda: second_calls.append(1))
    invoke_stop()
    assert first_calls == [1]
    assert second_calls == [1]


def test_stop_handler_order():
    results = []
    add_stop_handler(lambda: results.append("first"))
    add_stop_handler(lambda: results.append("second"))
    invoke_stop()
    assert results == ["first", "second"]


def test_stop_handler_with_side_effects():
    data = []
    add_stop_handler(lambda: data.append("cleaned_up"))
    invoke_stop()
    assert data == ["cleaned_up"]