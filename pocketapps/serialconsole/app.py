"""Serial console application: switches between the connect and console views."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import Any, TextIO

from pocketapps.serialconsole.connect_view import (
    ConnectError,
    ConnectView,
    list_port_names,
)
from pocketapps.serialconsole.console_view import ConsoleView


class SerialConsole:
    """Shows the connect view until a port is opened, then the console view."""

    def __init__(
        self,
        connect_view_factory: Callable[[Callable[[Any], None]], Any] | None = None,
        console_view: Any = None,
    ) -> None:
        if connect_view_factory is None:
            def connect_view_factory(on_connected: Callable[[Any], None]) -> ConnectView:
                return ConnectView({}, on_connected)
        self.connect_view = connect_view_factory(self.show_console_view)
        self.console_view = console_view if console_view is not None else ConsoleView()
        self.active_view: Any = None
        self.disconnect_visible = False

    def _stop_active_view(self) -> None:
        if self.active_view is not None:
            self.active_view.on_stop()
            self.active_view = None

    def on_show(self) -> None:
        self.show_connect_view()

    def show_console_view(self, port: Any) -> None:
        self._stop_active_view()
        self.active_view = self.console_view
        self.console_view.on_start(port)
        self.disconnect_visible = True

    def show_connect_view(self) -> None:
        self._stop_active_view()
        self.active_view = self.connect_view
        self.connect_view.on_start()
        self.disconnect_visible = False

    def disconnect(self) -> None:
        """Leave the console; stopping it also closes the port."""
        self.show_connect_view()

    def on_hide(self) -> None:
        self._stop_active_view()


class _TailPrinter:
    """Writes only the part of the console text not yet shown."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self._shown = ""

    def __call__(self, text: str) -> None:
        if text == self._shown:
            return
        new = text[len(self._shown):] if text.startswith(self._shown) else text
        self.stream.write(new)
        self.stream.flush()
        self._shown = text


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="serialconsole", description="Interactive serial console."
    )
    parser.add_argument("port", nargs="?", help="serial port to open")
    parser.add_argument("--baud", type=int, default=None, help="baud rate")
    parser.add_argument("--crlf", action="store_true", help="end lines with CR LF")
    parser.add_argument("--list", action="store_true", help="list serial ports and exit")
    args = parser.parse_args(argv)

    if args.list or args.port is None:
        for name in list_port_names():
            print(name)
        return 0

    store: dict[str, int] = {}
    if args.baud is not None:
        store["speed"] = args.baud

    console = ConsoleView(on_render=_TailPrinter(sys.stdout))
    app = SerialConsole(
        lambda on_connected: ConnectView(store, on_connected, port_names=lambda: [args.port]),
        console,
    )
    app.on_show()
    try:
        app.connect_view.connect()
    except ConnectError as exc:
        app.on_hide()
        print(f"error: {exc}", file=sys.stderr)
        return 1

    console.set_terminator(1 if args.crlf else 0)
    try:
        for line in sys.stdin:
            console.send(line.rstrip("\r\n"))
    except KeyboardInterrupt:
        pass
    finally:
        app.on_hide()
    return 0