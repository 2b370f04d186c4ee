"""Serial console: a background reader, a ring buffer of received bytes and sending."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from enum import Enum
from typing import Any

log = logging.getLogger(__name__)

RECEIVE_BUFFER_SIZE = 512
RENDER_INTERVAL = 0.5


class Terminator(Enum):
    """Line ending appended to every line that is sent."""

    LF = "\n"
    CRLF = "\r\n"


_TERMINATORS = (Terminator.LF, Terminator.CRLF)


class ReceiveBuffer:
    """Fixed-size ring of received bytes; the oldest bytes are overwritten first."""

    def __init__(self, size: int = RECEIVE_BUFFER_SIZE) -> None:
        if size <= 0:
            raise ValueError("buffer size must be positive")
        self.size = size
        self._data = bytearray(size)
        self.position = 0
        self.wrapped = False

    def append(self, byte: int) -> None:
        """Store one byte, wrapping to the start when the end is reached."""
        self._data[self.position] = byte
        self.position += 1
        if self.position == self.size:
            self.position = 0
            self.wrapped = True

    def render(self) -> str:
        """Buffer contents oldest first, with a newline where the ring wrapped."""
        newest = bytes(self._data[: self.position])
        if self.wrapped and self.position:
            raw = bytes(self._data[self.position :]) + b"\n" + newest
        elif self.wrapped:
            raw = bytes(self._data)
        else:
            raw = newest
        return raw.decode("utf-8", errors="replace")

    def clear(self) -> None:
        self._data = bytearray(self.size)
        self.position = 0
        self.wrapped = False


class ConsoleView:
    """Reads from an open port in the background and sends typed lines to it.

    The port needs ``read(size)``, ``write(data)``, ``close()`` and ``is_open``,
    as a ``serial.Serial`` has. ``on_render`` receives the buffer text about
    twice a second while the view runs.
    """

    def __init__(self, on_render: Callable[[str], None] | None = None) -> None:
        self.on_render = on_render
        self.buffer = ReceiveBuffer()
        self.terminator = Terminator.LF
        self._lock = threading.RLock()
        self._port: Any = None
        self._reader: threading.Thread | None = None
        self._reader_stop = threading.Event()
        self._renderer: threading.Thread | None = None
        self._renderer_stop = threading.Event()

    @property
    def port(self) -> Any:
        return self._port

    @property
    def running(self) -> bool:
        return self._reader is not None

    def on_start(self, port: Any) -> None:
        """Take over ``port`` and start the reader and render threads."""
        with self._lock:
            if self._port is not None or self._reader is not None:
                raise RuntimeError("console is already running")
            self.buffer.clear()
            self._port = port

            self._reader_stop = threading.Event()
            self._reader = threading.Thread(
                target=self._read_loop,
                args=(port, self._reader_stop),
                name="SerConsUart",
                daemon=True,
            )
            self._reader.start()

            self._renderer_stop = threading.Event()
            self._renderer = threading.Thread(
                target=self._render_loop,
                args=(self._renderer_stop,),
                name="SerConsView",
                daemon=True,
            )
            self._renderer.start()

    def _read_loop(self, port: Any, stop: threading.Event) -> None:
        while not stop.is_set():
            try:
                data = port.read(1)
            except OSError as exc:
                log.error("Failed to read from port: %s", exc)
                break
            # The view may have been stopped while waiting for data.
            if stop.is_set():
                break
            if data:
                with self._lock:
                    for byte in data:
                        self.buffer.append(byte)

    def _render_loop(self, stop: threading.Event) -> None:
        while not stop.is_set():
            started = time.monotonic()
            self.render()
            remaining = RENDER_INTERVAL - (time.monotonic() - started)
            if remaining > 0:
                stop.wait(remaining)

    def render(self) -> str:
        """Current buffer text, also passed to ``on_render``."""
        with self._lock:
            text = self.buffer.render()
        if self.on_render is not None:
            self.on_render(text)
        return text

    def set_terminator(self, index: int) -> None:
        """Choose the line ending by its position in the option list; others are ignored."""
        if 0 <= index < len(_TERMINATORS):
            with self._lock:
                self.terminator = _TERMINATORS[index]

    def send(self, text: str) -> bool:
        """Send ``text`` plus the terminator; return whether it was written."""
        with self._lock:
            payload = (text + self.terminator.value).encode("utf-8")
            port = self._port
        if port is None:
            return False
        try:
            written = port.write(payload)
        except OSError as exc:
            log.error('Failed to send "%s": %s', text, exc)
            return False
        if written is not None and written < len(payload):
            log.error('Failed to send "%s"', text)
            return False
        return True

    @staticmethod
    def _stop_thread(thread: threading.Thread | None, stop: threading.Event) -> None:
        stop.set()
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def on_stop(self) -> None:
        """Stop both threads and close the port."""
        with self._lock:
            renderer, self._renderer = self._renderer, None
            reader, self._reader = self._reader, None
        self._stop_thread(renderer, self._renderer_stop)
        self._stop_thread(reader, self._reader_stop)

        with self._lock:
            port, self._port = self._port, None
        if port is not None and getattr(port, "is_open", True):
            port.close()