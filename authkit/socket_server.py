"""Server that reads framed messages and hands their bodies to a sink."""

import argparse
import logging
import socket
import sys
import threading
from typing import Callable, List, Optional

from .framing import HEADER_LENGTH, parse_header

log = logging.getLogger(__name__)

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 7373


def _log_body(body: bytes) -> None:
    log.info("%s", body.decode("utf-8", errors="replace"))


def handle_connection(conn: socket.socket, sink: Callable[[bytes], None] = _log_body) -> None:
    """Read frames from ``conn`` until it closes, passing every body to ``sink``."""
    pending = b""
    with conn:
        while True:
            try:
                chunk = conn.recv(1024)
            except OSError as exc:
                log.info("connection error: %s", exc)
                return
            if not chunk:
                return
            pending += chunk
            while True:
                header = parse_header(pending)
                if header is None or header.package_length < 0:
                    break
                end = HEADER_LENGTH + header.package_length
                if len(pending) < end:
                    break
                log.debug(
                    "packageLength: %d, headerLength: %d, protocolVersion: %d, operation: %d, sequenceID: %d",
                    header.package_length, header.header_length, header.protocol_version,
                    header.operation, header.sequence_id,
                )
                sink(pending[HEADER_LENGTH:end])
                pending = pending[end:]


def serve(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> None:
    """Accept connections forever, one thread per client."""
    with socket.create_server((host, port)) as listener:
        log.info("Waiting for client ...")
        while True:
            try:
                conn, addr = listener.accept()
            except OSError as exc:
                log.info("accept error: %s", exc)
                continue
            log.info("%s tcp connection success", addr)
            threading.Thread(target=handle_connection, args=(conn,), daemon=True).start()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Receive framed messages.")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    try:
        serve(args.host, args.port)
    except OSError as exc:
        print(f"Fatal error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0