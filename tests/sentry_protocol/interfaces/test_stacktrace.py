from sentry_protocol.interfaces.stacktrace import Frame, Stacktrace


def make_frame(**kwargs) -> Frame:
    return Frame(
        filename="app.py",
        function="main",
        module="app",
        lineno=10,
        colno=4,
        abs_path="/srv/app.py",
        context_line="run()",
        pre_context=["import os"],
        post_context=["exit()"],
        vars={"count": "3"},
        package="app",
        platform="python",
        **kwargs,
    )


def test_frame_validity():
    assert not Frame().is_valid()
    assert Frame(filename="app.py").is_valid()
    assert Frame(function="main").is_valid()
    assert Frame(module="app").is_valid()
    assert not Frame(lineno=3, abs_path="/srv/app.py").is_valid()


def test_frame_to_json():
    frame = Frame(filename="app.py", function="main", lineno=10)

    assert frame.to_json() == {
        "filename": "app.py",
        "function": "main",
        "lineno": 10,
        "in_app": False,
    }


def test_frame_set_in_app():
    frame = Frame(function="main")
    frame.set_in_app(True)

    assert frame.to_json()["in_app"] is True


def test_frame_round_trip():
    frame = make_frame(in_app=True, instruction_addr="0x1000")

    assert Frame.from_json(frame.to_json()) == frame


def test_frame_from_json_lenient():
    frame = Frame.from_json(
        {
            "filename": "app.py",
            "lineno": "10",
            "in_app": "yes",
            "vars": {"a": "1", "b": 2, "c": [1], "d": True, "e": None},
            "pre_context": ["x", 1, "y"],
            "post_context": "nope",
        }
    )

    assert frame.filename == "app.py"
    assert frame.lineno == -1
    assert frame.in_app is False
    assert frame.vars == {"a": "1", "b": "2"}
    assert frame.pre_context == ["x", "y"]
    assert frame.post_context == []


def test_stacktrace_empty():
    stacktrace = Stacktrace()

    assert not stacktrace.is_valid()
    assert stacktrace.to_json() == {"frames": []}


def test_stacktrace_keeps_frame_order():
    stacktrace = Stacktrace(frames=[Frame(function="outer"), Frame(function="inner")])

    assert stacktrace.is_valid()
    parsed = Stacktrace.from_json(stacktrace.to_json())
    assert [frame.function for frame in parsed.frames] == ["outer", "inner"]
    assert parsed == stacktrace


def test_stacktrace_from_json_drops_invalid_frames():
    stacktrace = Stacktrace.from_json(
        {"frames": [{"filename": "a.py"}, {}, "junk", {"function": "b"}]}
    )

    assert [frame.to_json() for frame in stacktrace.frames] == [
        {"filename": "a.py", "in_app": False},
        {"function": "b", "in_app": False},
    ]


def test_stacktrace_with_invalid_frame():
    stacktrace = Stacktrace(frames=[Frame(function="a"), Frame()])

    assert not stacktrace.is_valid()
    assert stacktrace.to_json() == {"frames": [{"function": "a", "in_app": False}]}


def test_stacktrace_frames_not_a_list():
    assert Stacktrace.from_json({"frames": "x"}).frames == []
