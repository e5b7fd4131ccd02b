"""Client that sends text messages or the dominant colours of a BMP image."""

from __future__ import annotations

import argparse
import socket
import sys
from os import PathLike

from .bmp import BmpError, analyze_bmp_image
from .colors import ColorCounter

PORT = 8089
DEFAULT_HOST = "127.0.0.1"
BUFFER_SIZE = 1024
MESSAGE_PREFIX = "message: "
COLORS_PREFIX = "couleurs: "
MAX_LISTED = 10
PROMPT = "Votre message (max 1000 caracteres): "


def build_colors_message(counter: ColorCounter) -> str:
    """Build the ``couleurs:`` message for a counter sorted least frequent first.

    The message gives the number of colours announced (at most ten) and then
    the most frequent colours in descending order; the least frequent entry
    of the counter is never listed.
    """
    announced = min(counter.size, MAX_LISTED)
    listed = counter.counts[:0:-1][:MAX_LISTED]
    fields = [f"{COLORS_PREFIX}{announced}"]
    fields.extend(entry.color.hex() for entry in listed)
    return ",".join(fields)


def send_receive_message(sock: socket.socket, message: str) -> str:
    """Send ``message`` tagged as a text message and return the reply."""
    sock.sendall((MESSAGE_PREFIX + message).encode("utf-8"))
    reply = sock.recv(BUFFER_SIZE).decode("utf-8", "replace")
    print(f"Message reçu: {reply}")
    return reply


def send_colors(sock: socket.socket, path: str | PathLike[str]) -> str:
    """Send the dominant colours of the BMP image at ``path``; return the message."""
    message = build_colors_message(analyze_bmp_image(path))
    sock.sendall(message.encode("utf-8"))
    return message


def _prompt() -> str | None:
    print(PROMPT, end="", flush=True)
    line = sys.stdin.readline()
    return line or None


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point of the client.

    With one argument, the colours of that BMP image are sent. With more,
    a single text message is read and sent. With none, messages are read
    and sent until the end of input.
    """
    parser = argparse.ArgumentParser(
        prog="colorcast-client",
        description="Send messages or the dominant colours of a BMP image to the server.",
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help="server address")
    parser.add_argument("--port", type=int, default=PORT, help="server port")
    parser.add_argument("args", nargs="*", help="path of a BMP image")
    options = parser.parse_args(argv)

    try:
        sock = socket.create_connection((options.host, options.port))
    except OSError as exc:
        print(f"connection serveur: {exc}", file=sys.stderr)
        return 1

    with sock:
        try:
            if len(options.args) == 1:
                send_colors(sock, options.args[0])
            elif options.args:
                message = _prompt()
                if message is not None:
                    send_receive_message(sock, message)
            else:
                while (message := _prompt()) is not None:
                    send_receive_message(sock, message)
        except BmpError as exc:
            print(f"{options.args[0]}: {exc}", file=sys.stderr)
            return 1
        except OSError as exc:
            print(f"erreur: {exc}", file=sys.stderr)
            return 1
    return 0