"""Port and baud-rate selection for the serial console."""

from __future__ import annotations

import re
from collections.abc import Callable, MutableMapping, Sequence
from typing import Any

import serial
from serial.tools import list_ports

DEFAULT_SPEED = 115200
PREF_BUS = "bus"
PREF_SPEED = "speed"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class ConnectError(Exception):
    """Raised when a serial connection cannot be made; the message is user-facing."""


def join_names(names: Sequence[str]) -> str:
    """Option text for the port list: last name first, each later one followed by a comma."""
    reversed_names = list(reversed(names))
    if not reversed_names:
        return ""
    return reversed_names[0] + "".join(f"{name}," for name in reversed_names[1:])


def _parse_int(text: str) -> int:
    """Leading integer of ``text``, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def list_port_names() -> list[str]:
    """Device names of the serial ports present on this machine."""
    return [port.device for port in list_ports.comports()]


def open_port(name: str, baud_rate: int) -> serial.Serial:
    """Open ``name`` at ``baud_rate`` with a short read timeout."""
    if baud_rate <= 0:
        raise ConnectError("Invalid speed")
    try:
        return serial.Serial(name, baud_rate, timeout=0.05)
    except ValueError as exc:
        raise ConnectError("Failed to set baud rate") from exc
    except OSError as exc:
        raise ConnectError("Failed to connect to UART") from exc


class ConnectView:
    """Lets the user pick a port and speed, remembering both between sessions."""

    def __init__(
        self,
        store: MutableMapping[str, int],
        on_connected: Callable[[Any], None],
        port_names: Callable[[], Sequence[str]] | None = None,
        opener: Callable[[str, int], Any] | None = None,
    ) -> None:
        self.store = store
        self.on_connected = on_connected
        self._port_names = port_names if port_names is not None else list_port_names
        self._opener = opener if opener is not None else open_port
        self.names: list[str] = []
        self.options = ""
        self.selected_index = 0
        self.speed_text = str(DEFAULT_SPEED)

    @property
    def speed(self) -> int:
        """Baud rate typed by the user, or 0 when it is not a number."""
        return _parse_int(self.speed_text)

    def on_start(self) -> None:
        """Refresh the port list and restore the last choices."""
        self.names = list(self._port_names())
        self.options = join_names(self.names)
        self.selected_index = 0
        bus_index = int(self.store.get(PREF_BUS, 0))
        if 0 <= bus_index < len(self.names):
            self.selected_index = bus_index
        self.speed_text = str(int(self.store.get(PREF_SPEED, DEFAULT_SPEED)))

    def connect(self) -> Any:
        """Open the selected port and hand it to ``on_connected``."""
        if not 0 <= self.selected_index < len(self.names):
            raise ConnectError("No UART selected")
        speed = self.speed
        if speed <= 0:
            raise ConnectError("Invalid speed")
        port = self._opener(self.names[self.selected_index], speed)
        self.on_connected(port)
        return port

    def on_stop(self) -> None:
        """Remember the chosen speed (when valid) and port index."""
        speed = self.speed
        if speed > 0:
            self.store[PREF_SPEED] = speed
        self.store[PREF_BUS] = self.selected_index