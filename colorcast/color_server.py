"""Server that echoes text messages and charts the colour lists it receives."""

from __future__ import annotations

import argparse
import socket
import sys
from os import PathLike

from .chart import SVG_FILE_PATH, open_in_browser, write_pie_chart

PORT = 8089
BACKLOG = 10
BUFFER_SIZE = 1024
MESSAGE_CODE = "message:"


def handle_message(data: str, svg_path: str | PathLike[str] = SVG_FILE_PATH) -> str | None:
    """Process one message and return the reply to send, if any.

    A message whose first word is ``message:`` is echoed back; anything else
    is treated as a colour list, drawn as a pie chart and opened in a browser.
    """
    print(f"Message recu: {data}")
    words = data.split()
    code = words[0] if words else ""
    if code == MESSAGE_CODE:
        return data
    write_pie_chart(data, svg_path)
    open_in_browser(svg_path)
    return None


def _serve_connection(conn: socket.socket, svg_path: str | PathLike[str]) -> None:
    with conn:
        raw = conn.recv(BUFFER_SIZE)
        data = raw.split(b"\x00", 1)[0].decode("utf-8", "replace")
        try:
            reply = handle_message(data, svg_path)
        except OSError as exc:
            print(f"Error opening file: {exc}", file=sys.stderr)
            return
        if reply is not None:
            try:
                conn.sendall(reply.encode("utf-8"))
            except OSError as exc:
                print(f"erreur ecriture: {exc}", file=sys.stderr)


def run(
    host: str = "",
    port: int = PORT,
    svg_path: str | PathLike[str] = SVG_FILE_PATH,
) -> None:
    """Accept clients one after another until interrupted."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind((host, port))
        server.listen(BACKLOG)
        try:
            while True:
                conn, _ = server.accept()
                _serve_connection(conn, svg_path)
        except KeyboardInterrupt:
            print("\nSignal Ctrl+C capturé. Sortie du programme.")


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point of the colour server."""
    parser = argparse.ArgumentParser(
        prog="colorcast-server",
        description="Echo text messages and draw received colour lists as a pie chart.",
    )
    parser.add_argument("--host", default="", help="address to listen on")
    parser.add_argument("--port", type=int, default=PORT, help="port to listen on")
    parser.add_argument("--svg", default=SVG_FILE_PATH, help="where to write the chart")
    args = parser.parse_args(argv)
    try:
        run(args.host, args.port, args.svg)
    except OSError as exc:
        print(f"bind: {exc}", file=sys.stderr)
        return 1
    return 0