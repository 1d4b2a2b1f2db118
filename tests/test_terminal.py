import io

from halfblock import terminal


class FakeTty(io.StringIO):
    def isatty(self):
        return True


def test_non_tty_falls_back():
    assert terminal.get_terminal_size(io.StringIO()) == (80, 24)


def test_tty_without_size_falls_back():
    # StringIO has no file descriptor to query
    assert terminal.get_terminal_size(FakeTty()) == (80, 24)


def test_pixel_bounds_are_two_pixels_per_row(monkeypatch):
    monkeypatch.setattr(terminal, "get_terminal_size", lambda stream=None: (100, 30))
    assert terminal.get_pixel_bounds() == (100, 58)


def test_pixel_bounds_keep_at_least_one_row(monkeypatch):
    monkeypatch.setattr(terminal, "get_terminal_size", lambda stream=None: (10, 1))
    assert terminal.get_pixel_bounds() == (10, 2)
