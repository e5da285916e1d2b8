import timeprofiler


def test_get_version_returns_string():
    assert isinstance(timeprofiler.get_version(), str)


def test_public_api():
    assert set(timeprofiler.__all__) == {
        "ProfilerConfig",
        "TimeProfiler",
        "UnmeasuredReadError",
        "get_version",
        "profiled",
    }
    assert issubclass(timeprofiler.UnmeasuredReadError, RuntimeError)
