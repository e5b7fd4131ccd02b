"""Concurrent server that echoes back messages tagged ``message:``."""

from __future__ import annotations

import argparse
import socket
import sys
import threading

PORT = 8089
BACKLOG = 10
BUFFER_SIZE = 1024
MESSAGE_CODE = "message:"
_CODE_WIDTH = 9


def handle_message(data: str) -> str | None:
    """Return ``data`` when it is tagged as a message, otherwise ``None``.

    The tag is the first word of the message, cut to nine characters.
    """
    print(f"Message reçu: {data}")
    words = data.split()
    if not words:
        return None
    code = words[0][:_CODE_WIDTH]
    return data if code == MESSAGE_CODE else None


def serve_client(conn: socket.socket) -> None:
    """Answer a client's messages until it disconnects, then close it."""
    with conn:
        while True:
            try:
                raw = conn.recv(BUFFER_SIZE)
            except OSError as exc:
                print(f"Erreur de réception: {exc}", file=sys.stderr)
                break
            if not raw:
                print("Client déconnecté.")
                break
            reply = handle_message(raw.decode("utf-8", "replace"))
            if reply is None:
                continue
            try:
                conn.sendall(reply.encode("utf-8"))
            except OSError as exc:
                print(f"Erreur d'écriture: {exc}", file=sys.stderr)


def run(host: str = "", port: int = PORT) -> None:
    """Accept clients, serving each in its own thread, until interrupted."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind((host, port))
        server.listen(BACKLOG)
        print("Serveur en attente de connexions...")
        try:
            while True:
                try:
                    conn, _ = server.accept()
                except OSError as exc:
                    print(f"accept: {exc}", file=sys.stderr)
                    continue
                threading.Thread(target=serve_client, args=(conn,), daemon=True).start()
        except KeyboardInterrupt:
            print("\nSignal Ctrl+C capturé. Sortie du programme.")


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point of the echo server."""
    parser = argparse.ArgumentParser(
        prog="colorcast-echo", description="Echo back messages tagged 'message:'."
    )
    parser.add_argument("--host", default="", help="address to listen on")
    parser.add_argument("--port", type=int, default=PORT, help="port to listen on")
    args = parser.parse_args(argv)
    try:
        run(args.host, args.port)
    except OSError as exc:
        print(f"bind: {exc}", file=sys.stderr)
        return 1
    return 0