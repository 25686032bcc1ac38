"""Client that sends framed JSON messages to the frame server."""

import argparse
import socket
import sys
import time
from typing import List, Optional

from .framing import enpack

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 7373


def get_session() -> str:
    """Current Unix time in seconds, as a decimal string."""
    return str(int(time.time()))


def _message(index: int, session: str) -> str:
    return (
        '{"ID":"' + str(index) + '","Session":"' + session
        + '20170914165908","Meta":"demo","Content":"message"}'
    )


def build_messages(count: int, session: str) -> List[str]:
    return [_message(i, session) for i in range(count)]


def send_messages(sock: socket.socket, count: int = 10) -> List[str]:
    """Send ``count`` framed messages, print each one, then close the socket."""
    sent = []
    try:
        for i in range(count):
            words = _message(i, get_session())
            sock.sendall(enpack(words.encode("utf-8")))
            print(words)
            sent.append(words)
        print("send over")
    finally:
        sock.close()
    return sent


def connect_and_send(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> List[str]:
    sock = socket.create_connection((host, port))
    print("connect success")
    return send_messages(sock)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Send framed messages to a frame server.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    try:
        connect_and_send(args.host, args.port)
    except OSError as exc:
        print(f"Fatal error: {exc}", file=sys.stderr)
        return 1
    return 0