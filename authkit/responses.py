"""Response success values and response errors carrying HTTP status codes."""

from dataclasses import dataclass
from typing import Any, Optional


def _format(msg: str, args: tuple) -> str:
    return msg % args if args else msg


@dataclass
class ResponseSuccess:
    code: int
    message: str
    data: Any = None


class ResponseError(Exception):
    """An error that maps onto an API response."""

    def __init__(self, code: int, message: str, status_code: int, err: Optional[BaseException] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.status_code = status_code
        self.err = err
        if err is not None:
            self.__cause__ = err

    def __str__(self) -> str:
        if self.err is not None:
            return str(self.err)
        return self.message

    def __repr__(self) -> str:
        return (
            f"ResponseError(code={self.code!r}, message={self.message!r}, "
            f"status_code={self.status_code!r}, err={self.err!r})"
        )


def unwrap_response(err: BaseException) -> Optional[ResponseError]:
    """Return ``err`` if it is a ResponseError, else None."""
    return err if isinstance(err, ResponseError) else None


def wrap_response(err, code, status_code, msg, *args) -> ResponseError:
    return ResponseError(code, _format(msg, args), status_code, err)


def wrap_400_response(err, msg, *args) -> ResponseError:
    return wrap_response(err, 400, 400, msg, *args)


def wrap_500_response(err, msg, *args) -> ResponseError:
    return wrap_response(err, 500, 500, msg, *args)


def new_response(code, status_code, msg, *args) -> ResponseError:
    return ResponseError(code, _format(msg, args), status_code)


def new_400_response(code, msg, *args) -> ResponseError:
    return new_response(code, 400, msg, *args)


def new_500_response(code, msg, *args) -> ResponseError:
    return new_response(code, 500, msg, *args)


def new_403_response(code, msg, *args) -> ResponseError:
    return new_response(code, 403, msg, *args)