import datetime

import pytest

from authkit.log_hook import ALL_LEVELS, Hook, LogEntry


class Recorder:
    def __init__(self, fail=False):
        self.entries = []
        self.closed = False
        self.fail = fail

    def exec(self, entry):
        if self.fail:
            raise RuntimeError("boom")
        self.entries.append(entry)

    def close(self):
        self.closed = True


def _entry(message, **data):
    return LogEntry(level="info", message=message, time=datetime.datetime(2020, 1, 2, 3, 4, 5), data=data)


def test_default_and_custom_levels():
    recorder = Recorder()
    assert Hook(recorder).levels() == list(ALL_LEVELS)
    assert Hook(recorder, levels=[]).levels() == list(ALL_LEVELS)
    assert Hook(recorder, levels=["error"]).levels() == ["error"]


def test_entries_written_in_order_and_closed():
    recorder = Recorder()
    hook = Hook(recorder)
    for i in range(20):
        hook.fire(_entry(f"m{i}"))
    hook.flush()
    assert [e.message for e in recorder.entries] == [f"m{i}" for i in range(20)]
    assert recorder.closed is True


def test_extra_fills_missing_keys_only():
    recorder = Recorder()
    hook = Hook(recorder, extra={"app": "auth", "user": "default"})
    hook.fire(_entry("m", user="alice"))
    hook.flush()
    assert recorder.entries[0].data == {"app": "auth", "user": "alice"}


def test_fire_copies_entry():
    recorder = Recorder()
    hook = Hook(recorder, extra={"app": "auth"})
    original = _entry("m", k=1)
    hook.fire(original)
    hook.flush()
    written = recorder.entries[0]
    assert written is not original
    assert original.data == {"k": 1}
    assert written.time == original.time


def test_filter_applied():
    recorder = Recorder()

    def shout(entry):
        entry.message = entry.message.upper()
        return entry

    hook = Hook(recorder, filter=shout)
    hook.fire(_entry("quiet"))
    hook.flush()
    assert recorder.entries[0].message == "QUIET"


def test_exec_error_reported(capsys):
    hook = Hook(Recorder(fail=True))
    hook.fire(_entry("m"))
    hook.flush()
    assert "execution error: boom" in capsys.readouterr().err


def test_fire_after_flush_raises():
    hook = Hook(Recorder())
    hook.flush()
    with pytest.raises(RuntimeError):
        hook.fire(_entry("late"))


def test_several_workers_write_everything():
    recorder = Recorder()
    hook = Hook(recorder, max_workers=4, max_queues=2)
    for i in range(50):
        hook.fire(_entry(str(i)))
    hook.flush()
    assert sorted(int(e.message) for e in recorder.entries) == list(range(50))


def test_invalid_worker_count():
    with pytest.raises(ValueError):
        Hook(Recorder(), max_workers=0)