"""Broadcasting notifications over UDP and recording them in the journal."""

from __future__ import annotations

import argparse
import logging
import socket
import sqlite3
import sys
from typing import Optional, Sequence

from udpnotifier.event_log import EventLog

DEFAULT_PORT = 12345
BROADCAST_ADDRESS = "255.255.255.255"

logger = logging.getLogger(__name__)


class EmptyMessageError(ValueError):
    """Raised when asked to send an empty message."""


class SendError(OSError):
    """Raised when a datagram could not be sent."""


class Broadcaster:
    """Sends text messages as UTF-8 datagrams, logging each one that goes out."""

    def __init__(
        self,
        port: int = DEFAULT_PORT,
        address: str = BROADCAST_ADDRESS,
        log: Optional[EventLog] = None,
    ) -> None:
        self.port = port
        self.address = address
        self.log = log
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._socket.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)

    def send(self, message: str) -> int:
        """Send ``message``; return the number of bytes sent."""
        if not message:
            raise EmptyMessageError("message cannot be empty")
        data = message.encode("utf-8")
        try:
            sent = self._socket.sendto(data, (self.address, self.port))
        except OSError as error:
            raise SendError(f"send failed: {error}") from error
        if self.log is not None:
            self.log.log_event(message)
        logger.debug("Sent: %s", message)
        return sent

    def close(self) -> None:
        self._socket.close()

    def __enter__(self) -> Broadcaster:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="udpnotifier-send",
        description="Broadcast notification messages over UDP.",
    )
    parser.add_argument(
        "messages",
        nargs="*",
        help="messages to send; read one per line from standard input if none are given",
    )
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="destination port")
    parser.add_argument(
        "--address", default=BROADCAST_ADDRESS, help="destination address"
    )
    parser.add_argument("--db", help="SQLite file to journal sent messages in")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Send messages from the command line or standard input; return an exit status."""
    args = _parse_args(argv)
    messages = args.messages or (line.rstrip("\n") for line in sys.stdin)
    status = 0
    log = EventLog(args.db) if args.db else None
    try:
        with Broadcaster(args.port, args.address, log) as broadcaster:
            for message in messages:
                try:
                    broadcaster.send(message)
                except EmptyMessageError as error:
                    print(f"error: {error}", file=sys.stderr)
                    status = 1
                except SendError as error:
                    print(f"error: {error}", file=sys.stderr)
                    status = 1
                except sqlite3.Error as error:
                    print(f"error: could not write to journal: {error}", file=sys.stderr)
                    status = 1
                else:
                    print(f"Sent: {message}")
    finally:
        if log is not None:
            log.close()
    return status


if __name__ == "__main__":
    sys.exit(main())