import io
import struct
import sys
from types import SimpleNamespace

import pytest

from term_crt import terminal
from term_crt.terminal import FALLBACK_TERMINAL_SIZE, get_terminal_size


def fake_fcntl(rows, columns):
    def ioctl(fd, request, arg):
        assert request == terminal.termios.TIOCGWINSZ
        return struct.pack("HHHH", rows, columns, 0, 0)

    return SimpleNamespace(ioctl=ioctl)


def failing_fcntl():
    def ioctl(fd, request, arg):
        raise OSError(25, "Inappropriate ioctl for device")

    return SimpleNamespace(ioctl=ioctl)


@pytest.mark.skipif(not terminal.OS_IS_UNIX, reason="Unix-only")
class TestGetTerminalSize:
    def test_size(self, monkeypatch):
        monkeypatch.setattr(terminal, "fcntl", fake_fcntl(30, 100))
        assert get_terminal_size(0) == (100, 30)

    def test_query_failure(self, monkeypatch):
        monkeypatch.setattr(terminal, "fcntl", failing_fcntl())
        assert get_terminal_size(0) == FALLBACK_TERMINAL_SIZE

    @pytest.mark.parametrize("rows,columns", [(0, 100), (30, 0), (0, 0)])
    def test_zero_dimension(self, monkeypatch, rows, columns):
        monkeypatch.setattr(terminal, "fcntl", fake_fcntl(rows, columns))
        assert get_terminal_size(0) == FALLBACK_TERMINAL_SIZE

    def test_stdin_without_fd(self, monkeypatch):
        monkeypatch.setattr(terminal, "fcntl", fake_fcntl(30, 100))
        monkeypatch.setattr(sys, "stdin", io.StringIO())
        assert get_terminal_size() == FALLBACK_TERMINAL_SIZE

    def test_stdin_by_default(self, monkeypatch):
        fds = []

        def ioctl(fd, request, arg):
            fds.append(fd)
            return struct.pack("HHHH", 30, 100, 0, 0)

        monkeypatch.setattr(terminal, "fcntl", SimpleNamespace(ioctl=ioctl))
        monkeypatch.setattr(sys, "stdin", SimpleNamespace(fileno=lambda: 7))
        assert get_terminal_size() == (100, 30)
        assert fds == [7]


def test_non_unix(monkeypatch):
    monkeypatch.setattr(terminal, "OS_IS_UNIX", False)
    assert get_terminal_size() == FALLBACK_TERMINAL_SIZE


def test_fallback():
    assert FALLBACK_TERMINAL_SIZE == (80, 24)
