"""Internal gpsd session: dialing, JSON line framing and report dispatch."""

from __future__ import annotations

import asyncio
import json
import logging
import socket
import threading
from collections.abc import Callable
from typing import Any

from gpsdsensor.exceptions import GpsdConnectionError, GpsdShutdownError
from gpsdsensor.models.tpv import TPV_CLASS, TpvReport

_WATCH_ENABLE = b'?WATCH={"enable":true,"json":true}\n'
_WATCH_DISABLE = b'?WATCH={"enable":false}\n'

#: Longest gpsd line accepted; longer lines are dropped.
MAX_LINE_BYTES = 65536

ReportHandler = Callable[[Any], None]


def decode_report(line: bytes | str) -> tuple[str, Any] | None:
    """Decode one gpsd JSON line into ``(report_class, report)``.

    ``TPV`` objects become :class:`TpvReport`; every other class is returned
    as the parsed dict. Returns ``None`` for lines that are not JSON objects
    with a ``class`` member.
    """
    text = line.decode("utf-8", errors="replace") if isinstance(line, bytes) else line
    text = text.strip()
    if not text:
        return None
    parsed = json.loads(text)
    if not isinstance(parsed, dict):
        return None
    report_class = parsed.get("class")
    if not isinstance(report_class, str) or not report_class:
        return None
    if report_class == TPV_CLASS:
        return report_class, TpvReport.model_validate(parsed)
    return report_class, parsed


class GpsdSession:
    """Threaded gpsd client that emits decoded reports onto an asyncio loop.

    A reader thread blocks on the socket and hands every decoded report to
    the loop with ``call_soon_threadsafe``; handlers registered with
    :meth:`add_filter` then run on the loop thread.
    """

    def __init__(
        self,
        *,
        host: str,
        port: int,
        loop: asyncio.AbstractEventLoop,
        connect_timeout: float = 10.0,
        logger: logging.Logger | None = None,
    ) -> None:
        self._host = host
        self._port = port
        self._loop = loop
        self._connect_timeout = connect_timeout
        self._logger = logger or logging.getLogger(__name__)
        self._filters: dict[str, list[ReportHandler]] = {}
        self._sock: socket.socket | None = None
        self._reader: threading.Thread | None = None
        self._running = False

    @property
    def address(self) -> str:
        return f"{self._host}:{self._port}"

    @property
    def is_running(self) -> bool:
        """Whether the reader thread is consuming reports."""
        return self._running

    def add_filter(self, report_class: str, handler: ReportHandler) -> None:
        """Register *handler* for every report of *report_class*."""
        self._filters.setdefault(report_class, []).append(handler)

    def dial(self) -> None:
        """Open the TCP connection to gpsd."""
        try:
            sock = socket.create_connection((self._host, self._port), timeout=self._connect_timeout)
        except OSError as exc:
            raise GpsdConnectionError(
                f"Failed to connect to gpsd at {self.address}: {exc}",
                address=self.address,
            ) from exc
        # Reads block until gpsd sends something; only the dial is bounded.
        sock.settimeout(None)
        self._sock = sock
        self._logger.info("Connected to gpsd at %s", self.address)

    def watch(self) -> None:
        """Enable JSON watch mode and start the reader thread."""
        sock = self._sock
        if sock is None:
            raise GpsdConnectionError("gpsd session is not dialed", address=self.address)
        try:
            sock.sendall(_WATCH_ENABLE)
        except OSError as exc:
            raise GpsdConnectionError(
                f"Failed to enable gpsd watch at {self.address}: {exc}",
                address=self.address,
            ) from exc

        self._running = True
        reader = threading.Thread(
            target=self._read_loop,
            args=(sock,),
            name=f"gpsd-reader-{self.address}",
            daemon=True,
        )
        self._reader = reader
        reader.start()
        self._logger.debug("gpsd reader thread started")

    def close(self) -> None:
        """Disable watch mode and close the connection."""
        sock = self._sock
        self._sock = None
        was_running = self._running
        self._running = False

        if sock is None:
            return
        try:
            if was_running:
                try:
                    sock.sendall(_WATCH_DISABLE)
                    sock.shutdown(socket.SHUT_RDWR)
                except OSError:
                    # Peer already gone; closing below is all that is left.
                    self._logger.debug("gpsd watch disable failed", exc_info=True)
            sock.close()
        except OSError as exc:
            raise GpsdShutdownError(f"Failed to close gpsd session at {self.address}: {exc}") from exc
        finally:
            reader = self._reader
            self._reader = None
            if reader is not None and reader is not threading.current_thread():
                reader.join(timeout=self._connect_timeout)
        self._logger.info("Closed gpsd session at %s", self.address)

    def _read_loop(self, sock: socket.socket) -> None:
        oversized = False
        with sock.makefile("rb") as stream:
            while self._running:
                try:
                    line = stream.readline(MAX_LINE_BYTES)
                except (OSError, ValueError):
                    break
                if not line:
                    break
                if not line.endswith(b"\n") and len(line) >= MAX_LINE_BYTES:
                    # Skip chunks until the newline that ends the oversized line.
                    if not oversized:
                        self._logger.debug("gpsd line over %d bytes dropped", MAX_LINE_BYTES)
                    oversized = True
                    continue
                if oversized:
                    oversized = False
                    continue
                try:
                    decoded = decode_report(line)
                except Exception:
                    self._logger.debug("gpsd line parse failure: %r", line[:200], exc_info=True)
                    continue
                if decoded is None:
                    continue
                report_class, report = decoded
                self._logger.debug("Received gpsd report class=%s", report_class)
                if report_class in self._filters:
                    try:
                        self._loop.call_soon_threadsafe(self._dispatch, report_class, report)
                    except RuntimeError:
                        # Event loop closed underneath us.
                        break

        if self._running:
            self._running = False
            self._logger.warning("gpsd connection to %s lost; reports stopped", self.address)

    def _dispatch(self, report_class: str, report: Any) -> None:
        for handler in self._filters.get(report_class, []):
            try:
                handler(report)
            except Exception:
                self._logger.exception("gpsd %s handler failed", report_class)
