import socket
import subprocess
from unittest import mock

from colorcast import color_server
from colorcast.chart import pie_chart_svg
from colorcast.color_server import handle_message, main


def test_text_message_is_echoed(tmp_path, capsys):
    svg = tmp_path / "chart.svg"
    assert handle_message("message: bonjour\n", svg) == "message: bonjour\n"
    assert not svg.exists()
    assert "Message recu: message: bonjour" in capsys.readouterr().out


def test_code_must_be_a_whole_word(tmp_path):
    svg = tmp_path / "chart.svg"
    with mock.patch("colorcast.chart.subprocess.run") as run:
        run.return_value = subprocess.CompletedProcess([], 0)
        assert handle_message("message:bonjour", svg) is None
    assert svg.exists()


@mock.patch("colorcast.chart.subprocess.run")
def test_colour_list_is_charted(run, tmp_path):
    run.return_value = subprocess.CompletedProcess([], 0)
    svg = tmp_path / "chart.svg"
    data = "couleurs: 2,#ff0000,#00ff00"
    assert handle_message(data, svg) is None
    assert svg.read_text(encoding="utf-8") == pie_chart_svg(data)
    run.assert_called_once_with(["firefox", str(svg)], check=False)


def test_connection_echoes_message(tmp_path):
    svg = tmp_path / "chart.svg"
    reply = handle_message("message: salut", svg)
    assert reply == "message: salut"
    client, server = socket.socketpair()
    with client:
        client.sendall(b"message: salut")
        color_server._serve_connection(server, svg)
        assert client.recv(1024) == reply.encode()
        assert client.recv(1024) == b""
    assert not svg.exists()


@mock.patch("colorcast.chart.subprocess.run")
def test_connection_charts_colours_without_reply(run, tmp_path):
    run.return_value = subprocess.CompletedProcess([], 0)
    svg = tmp_path / "chart.svg"
    client, server = socket.socketpair()
    with client:
        client.sendall(b"couleurs: 2,#123456,#abcdef")
        color_server._serve_connection(server, svg)
        assert client.recv(1024) == b""
    content = svg.read_text(encoding="utf-8")
    assert 'fill="#123456"' in content
    assert 'fill="#abcdef"' in content


def test_main_reports_bind_failure(capsys):
    with socket.create_server(("127.0.0.1", 0)) as occupied:
        port = occupied.getsockname()[1]
        assert main(["--host", "127.0.0.1", "--port", str(port)]) == 1
    assert "bind" in capsys.readouterr().err