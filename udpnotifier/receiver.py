"""Receiving notification datagrams and placing their pop-ups."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
from typing import Iterator, Optional, Sequence

DEFAULT_PORT = 12345
ANY_ADDRESS = "0.0.0.0"
POPUP_OFFSET = (20, 20)
POPUP_DURATION_MS = 2000
MAX_DATAGRAM = 65535

logger = logging.getLogger(__name__)


def popup_position(
    screen: tuple[int, int, int, int],
    popup_size: tuple[int, int],
    offset: tuple[int, int] = POPUP_OFFSET,
) -> tuple[int, int]:
    """Top-left corner placing a pop-up in the bottom-right of ``screen``.

    ``screen`` is the available area as (left, top, width, height).
    """
    left, top, width, height = screen
    popup_width, popup_height = popup_size
    offset_x, offset_y = offset
    return (
        left + width - popup_width - offset_x,
        top + height - popup_height - offset_y,
    )


class Receiver:
    """A UDP socket, shared with other listeners, that yields incoming text messages."""

    def __init__(self, port: int = DEFAULT_PORT, host: str = ANY_ADDRESS) -> None:
        self._socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        if hasattr(socket, "SO_REUSEPORT"):
            try:
                self._socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEPORT, 1)
            except OSError:
                pass
        try:
            self._socket.bind((host, port))
        except OSError:
            self._socket.close()
            raise

    def address(self) -> tuple[str, int]:
        """The (host, port) the socket is bound to."""
        host, port = self._socket.getsockname()[:2]
        return host, port

    def receive(self, timeout: Optional[float] = None) -> Optional[str]:
        """Wait for one datagram and return its text, or None if ``timeout`` passes."""
        self._socket.settimeout(timeout)
        try:
            data, _ = self._socket.recvfrom(MAX_DATAGRAM)
        except socket.timeout:
            return None
        message = data.decode("utf-8", errors="replace")
        logger.debug("Message received: %s", message)
        return message

    def messages(self, timeout: Optional[float] = None) -> Iterator[str]:
        """Yield messages as they arrive; stop when none comes within ``timeout``."""
        while True:
            message = self.receive(timeout)
            if message is None:
                return
            yield message

    def close(self) -> None:
        self._socket.close()

    def __enter__(self) -> Receiver:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="udpnotifier-receive",
        description="Print notification messages received over UDP.",
    )
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    parser.add_argument("--host", default=ANY_ADDRESS, help="address to listen on")
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="stop after this many seconds without a message",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Listen for messages and print each one; return an exit status."""
    args = _parse_args(argv)
    try:
        with Receiver(args.port, args.host) as receiver:
            for message in receiver.messages(args.timeout):
                print(message, flush=True)
    except KeyboardInterrupt:
        pass
    except OSError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())