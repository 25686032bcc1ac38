"""Structured logging with trace, account and span fields."""

import datetime
import json
import logging
import sys
import traceback
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, TextIO

from .identifiers import new_trace_id
from .log_hook import LogEntry

TRACE_ID_KEY = "trace_id"
ACCOUNT_KEY_KEY = "account_key"
SPAN_TITLE_KEY = "span_title"
SPAN_FUNCTION_KEY = "span_function"
VERSION_KEY = "version"
STACK_KEY = "stack"

TRACE = 5

_RESERVED = frozenset({TRACE_ID_KEY, SPAN_TITLE_KEY, SPAN_FUNCTION_KEY, VERSION_KEY})

# Numeric levels: 0 panic, 1 fatal, 2 error, 3 warning, 4 info, 5 debug, 6 trace.
_LEVELS = {
    0: logging.CRITICAL,
    1: logging.CRITICAL,
    2: logging.ERROR,
    3: logging.WARNING,
    4: logging.INFO,
    5: logging.DEBUG,
    6: TRACE,
}

_TRACE_CTX = object()
_ACCOUNT_CTX = object()

Context = Mapping[Any, Any]


def _level_name(levelno: int) -> str:
    if levelno >= logging.CRITICAL:
        return "fatal"
    if levelno >= logging.ERROR:
        return "error"
    if levelno >= logging.WARNING:
        return "warning"
    if levelno >= logging.INFO:
        return "info"
    if levelno >= logging.DEBUG:
        return "debug"
    return "trace"


def _record_time(record: logging.LogRecord) -> str:
    moment = datetime.datetime.fromtimestamp(record.created).astimezone()
    return moment.isoformat(timespec="seconds")


def _record_fields(record: logging.LogRecord) -> dict:
    return dict(getattr(record, "fields", {}) or {})


_SAFE = set("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-._/@^+")


def _quote(value: Any) -> str:
    text = str(value)
    if text and all(ch in _SAFE for ch in text):
        return text
    return json.dumps(text, ensure_ascii=False)


class _TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        fields = _record_fields(record)
        parts = [
            f"time={_quote(_record_time(record))}",
            f"level={_level_name(record.levelno)}",
            f"msg={_quote(record.getMessage())}",
        ]
        parts.extend(f"{key}={_quote(fields[key])}" for key in sorted(fields, key=str))
        return " ".join(parts)


class _JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {}
        for key, value in _record_fields(record).items():
            key = str(key)
            if key in ("level", "msg", "time"):
                key = f"fields.{key}"
            payload[key] = value
        payload["level"] = _level_name(record.levelno)
        payload["msg"] = record.getMessage()
        payload["time"] = _record_time(record)
        return json.dumps(payload, ensure_ascii=False, default=str, sort_keys=True)


class _HookHandler(logging.Handler):
    """Passes records to an object with ``levels()`` and ``fire(entry)``."""

    def __init__(self, hook: Any):
        super().__init__(level=logging.NOTSET)
        self.hook = hook

    def emit(self, record: logging.LogRecord) -> None:
        name = _level_name(record.levelno)
        try:
            if name not in self.hook.levels():
                return
            self.hook.fire(
                LogEntry(
                    level=name,
                    message=record.getMessage(),
                    time=datetime.datetime.fromtimestamp(record.created),
                    data=_record_fields(record),
                )
            )
        except Exception:
            self.handleError(record)


@dataclass
class _Settings:
    version: str = ""
    trace_id_func: Callable[[], str] = new_trace_id


_logger = logging.getLogger("authkit.logger")
_logger.propagate = False
_logger.setLevel(logging.INFO)
_output = logging.StreamHandler(sys.stderr)
_output.setFormatter(_TextFormatter())
_logger.addHandler(_output)

_settings = _Settings()


def standard_logger() -> logging.Logger:
    return _logger


def set_level(level: int) -> None:
    """Set the level: 0 panic .. 6 trace."""
    try:
        _logger.setLevel(_LEVELS[level])
    except KeyError:
        raise ValueError(f"unknown log level: {level!r}") from None


def set_formatter(fmt: str) -> None:
    """Use ``"json"`` output, or key=value text for anything else."""
    _output.setFormatter(_JSONFormatter() if fmt == "json" else _TextFormatter())


def set_output(stream: TextIO) -> None:
    _output.setStream(stream)


def set_version(version: str) -> None:
    """Set the version written into every span's fields."""
    _settings.version = version


def set_trace_id_func(func: Optional[Callable[[], str]]) -> None:
    """Replace the trace id fallback; ``None`` restores the default."""
    _settings.trace_id_func = func if func is not None else new_trace_id


def add_hook(hook: Any) -> logging.Handler:
    """Attach a hook; returns the handler so it can be removed again."""
    handler = _HookHandler(hook)
    _logger.addHandler(handler)
    return handler


def new_trace_id_context(ctx: Optional[Context], trace_id: str) -> dict:
    return {**(ctx or {}), _TRACE_CTX: trace_id}


def from_trace_id_context(ctx: Optional[Context]) -> str:
    """Trace id stored in ``ctx``, or a freshly generated one."""
    value = (ctx or {}).get(_TRACE_CTX)
    if isinstance(value, str):
        return value
    return _settings.trace_id_func()


def new_account_key_context(ctx: Optional[Context], account_key: str) -> dict:
    return {**(ctx or {}), _ACCOUNT_CTX: account_key}


def from_account_key_context(ctx: Optional[Context]) -> str:
    value = (ctx or {}).get(_ACCOUNT_CTX)
    return value if isinstance(value, str) else ""


class Entry:
    """A set of fields to attach to every message written through it."""

    def __init__(self, fields: Optional[Mapping[str, Any]] = None, logger: Optional[logging.Logger] = None):
        self.fields = dict(fields or {})
        self._logger = logger or _logger

    def with_fields(self, fields: Mapping[str, Any]) -> "Entry":
        """New entry with ``fields`` added; trace, span and version keys are ignored."""
        extra = {key: value for key, value in fields.items() if key not in _RESERVED}
        return Entry({**self.fields, **extra}, self._logger)

    def with_field(self, key: str, value: Any) -> "Entry":
        return self.with_fields({key: value})

    def _log(self, level: int, fmt: str, args: tuple) -> None:
        if self._logger.isEnabledFor(level):
            message = fmt % args if args else fmt
            self._logger.log(level, message, extra={"fields": dict(self.fields)})

    def debug(self, fmt: str, *args: Any) -> None:
        self._log(logging.DEBUG, fmt, args)

    def info(self, fmt: str, *args: Any) -> None:
        self._log(logging.INFO, fmt, args)

    def print(self, fmt: str, *args: Any) -> None:
        self._log(logging.INFO, fmt, args)

    def warning(self, fmt: str, *args: Any) -> None:
        self._log(logging.WARNING, fmt, args)

    def error(self, fmt: str, *args: Any) -> None:
        self._log(logging.ERROR, fmt, args)

    def fatal(self, fmt: str, *args: Any) -> None:
        """Log at fatal level, then exit with status 1."""
        self._log(logging.CRITICAL, fmt, args)
        raise SystemExit(1)


def start_span(ctx: Optional[Context] = None, title: str = "", func_name: str = "") -> Entry:
    """Entry carrying version, trace id, account key and span fields."""
    fields: dict = {VERSION_KEY: _settings.version}
    trace_id = from_trace_id_context(ctx)
    if trace_id:
        fields[TRACE_ID_KEY] = trace_id
    account_key = from_account_key_context(ctx)
    if account_key:
        fields[ACCOUNT_KEY_KEY] = account_key
    if title:
        fields[SPAN_TITLE_KEY] = title
    if func_name:
        fields[SPAN_FUNCTION_KEY] = func_name
    return Entry(fields)


def debug(ctx: Optional[Context], fmt: str, *args: Any) -> None:
    start_span(ctx).debug(fmt, *args)


def info(ctx: Optional[Context], fmt: str, *args: Any) -> None:
    start_span(ctx).info(fmt, *args)


def printf(ctx: Optional[Context], fmt: str, *args: Any) -> None:
    start_span(ctx).print(fmt, *args)


def warning(ctx: Optional[Context], fmt: str, *args: Any) -> None:
    start_span(ctx).warning(fmt, *args)


def error(ctx: Optional[Context], fmt: str, *args: Any) -> None:
    start_span(ctx).error(fmt, *args)


def fatal(ctx: Optional[Context], fmt: str, *args: Any) -> None:
    start_span(ctx).fatal(fmt, *args)


def error_stack(ctx: Optional[Context], err: BaseException) -> None:
    """Log ``err`` at error level with its traceback in the ``stack`` field."""
    stack = "".join(traceback.format_exception(type(err), err, err.__traceback__))
    start_span(ctx).with_field(STACK_KEY, stack).error(str(err))