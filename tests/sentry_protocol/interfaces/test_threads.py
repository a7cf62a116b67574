from sentry_protocol.interfaces.stacktrace import Frame, Stacktrace
from sentry_protocol.interfaces.threads import Thread, Threads


def test_thread_validity():
    assert not Thread().is_valid()
    assert Thread(thread_id=0).is_valid()
    assert Thread(thread_id=1, crashed=True, current=True).is_valid()


def test_thread_to_json():
    thread = Thread(thread_id=1, crashed=True, current=True)

    assert thread.to_json() == {"id": 1, "crashed": True, "current": True}
    assert Thread(thread_id=0).to_json() == {"id": 0, "crashed": False, "current": False}


def test_thread_setters():
    thread = Thread(thread_id=1)
    thread.set_crashed(True)
    thread.set_current(True)

    assert thread.crashed is True
    assert thread.current is True


def test_thread_round_trip():
    thread = Thread(
        thread_id=4,
        name="worker",
        crashed=True,
        stacktrace=Stacktrace(frames=[Frame(function="run")]),
    )

    parsed = Thread.from_json(thread.to_json())

    assert parsed.model_dump() == thread.model_dump()


def test_thread_identity():
    assert Thread(thread_id=1, name="a") == Thread(thread_id=1, name="b")
    assert Thread(thread_id=1) != Thread(thread_id=2)
    assert Thread(thread_id=1) != Thread()


def test_thread_ordering():
    first, second, third = Thread(thread_id=1), Thread(thread_id=2), Thread(thread_id=3)

    assert sorted([third, first, second]) == [first, second, third]
    assert first < second <= third
    assert third > first


def test_thread_id_from_string():
    assert Thread.from_json({"id": "17"}).thread_id == 17
    assert Thread.from_json({"id": "main"}).thread_id == -1


def test_threads_round_trip():
    threads = Threads(values=[Thread(thread_id=1, crashed=True), Thread(thread_id=2)])

    assert threads.is_valid()
    parsed = Threads.from_json(threads.to_json())
    assert len(parsed.values) == 2
    assert parsed.values[0].crashed is True
    assert parsed.values[1].thread_id == 2


def test_threads_drops_invalid_threads():
    threads = Threads.from_json({"values": [{"id": 1}, {"name": "no id"}, {"id": "7"}]})

    assert [thread.thread_id for thread in threads.values] == [1, 7]


def test_threads_empty():
    assert not Threads().is_valid()
    assert Threads().to_json() == {"values": []}
