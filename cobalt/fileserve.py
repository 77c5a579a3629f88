"""A small static file server for previewing a built site."""

from __future__ import annotations

import logging
import mimetypes
import os
import shutil
import socket
import sys
import threading
from collections.abc import Sequence
from http.server import BaseHTTPRequestHandler, HTTPServer
from pathlib import Path

_log = logging.getLogger(__name__)

_NOT_FOUND_BODY = b"<h1> <center> 404: Page not found </center> </h1>"
_DEFAULT_HOSTNAME = "localhost"
_FALLBACK_PORT = 3000
# Start after the well-known ports, which need superuser rights on Unix.
_PORT_SCAN = range(1024, 9000)


class ServeError(Exception):
    """The server could not be started or stopped."""

    def __init__(self, message: object) -> None:
        super().__init__(str(message))
        self.message = str(message)

    def __str__(self) -> str:
        return self.message


def _port_is_available(host: str, port: int) -> bool:
    try:
        with socket.create_server((host, port)):
            return True
    except OSError:
        return False


def _get_available_port(host: str) -> int | None:
    return next((port for port in _PORT_SCAN if _port_is_available(host, port)), None)


class _FileServer(HTTPServer):
    allow_reuse_address = os.name != "nt"

    def __init__(self, address: tuple[str, int], source: Path) -> None:
        self.source = source
        super().__init__(address, _StaticFileHandler)


class _StaticFileHandler(BaseHTTPRequestHandler):
    server: _FileServer

    def do_GET(self) -> None:
        self._respond(send_body=True)

    def do_HEAD(self) -> None:
        self._respond(send_body=False)

    do_POST = do_PUT = do_DELETE = do_PATCH = do_OPTIONS = do_GET

    def log_message(self, format: str, *args: object) -> None:
        _log.debug("%s - %s", self.address_string(), format % args)

    def _respond(self, send_body: bool) -> None:
        try:
            self._serve_static(send_body)
        except OSError as exc:
            _log.error("%s", exc)

    def _serve_static(self, send_body: bool) -> None:
        req_path = self.path
        # Query strings are often used for cache busting; they name no file.
        position = req_path.rfind("?")
        if position != -1:
            req_path = req_path[:position]

        path = self.server.source / req_path[1:]
        serve_path = path if path.is_file() else path / "index.html"

        if not serve_path.exists():
            self.send_response(404)
            self.send_header("Content-Type", "text/html")
            self.send_header("Content-Length", str(len(_NOT_FOUND_BODY)))
            self.end_headers()
            if send_body:
                self.wfile.write(_NOT_FOUND_BODY)
            return

        with open(serve_path, "rb") as handle:
            size = os.fstat(handle.fileno()).st_size
            self.send_response(200)
            mime, _ = mimetypes.guess_type(str(serve_path))
            if mime is not None:
                self.send_header("Content-Type", mime)
            self.send_header("Content-Length", str(size))
            self.end_headers()
            if send_body:
                shutil.copyfileobj(handle, self.wfile)


class ServerBuilder:
    """Settings for a server, with the port picked automatically by default."""

    def __init__(self, source: str | os.PathLike[str]) -> None:
        self._source = Path(source)
        self._hostname: str | None = None
        self._port: int | None = None

    def hostname(self, hostname: str) -> ServerBuilder:
        """Override the hostname."""
        self._hostname = hostname
        return self

    def port(self, port: int) -> ServerBuilder:
        """Override the port; by default the first available one is used."""
        self._port = port
        return self

    def build(self) -> Server:
        """Create a server, choosing its port now."""
        hostname = self._hostname if self._hostname is not None else _DEFAULT_HOSTNAME
        port = self._port
        if port is None:
            port = _get_available_port(hostname)
        if port is None:
            # Let `serve` report the failure.
            port = _FALLBACK_PORT
        return Server(self._source, f"{hostname}:{port}")

    def serve(self) -> None:
        """Build a server and run it until closed."""
        self.build().serve()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ServerBuilder):
            return NotImplemented
        return (self._source, self._hostname, self._port) == (
            other._source,
            other._hostname,
            other._port,
        )

    def __repr__(self) -> str:
        return (
            f"ServerBuilder(source={str(self._source)!r}, "
            f"hostname={self._hostname!r}, port={self._port!r})"
        )


class Server:
    """Serves the files below a directory over HTTP."""

    def __init__(self, source: str | os.PathLike[str], addr: str) -> None:
        self._source = Path(source)
        self._addr = addr
        self._lock = threading.Lock()
        self._httpd: _FileServer | None = None

    @classmethod
    def new(cls, source: str | os.PathLike[str]) -> Server:
        """A server on the first available port on localhost."""
        return ServerBuilder(source).build()

    def source(self) -> Path:
        """The directory being served."""
        return self._source

    def addr(self) -> str:
        """The ``host:port`` address the server listens on."""
        return self._addr

    def is_running(self) -> bool:
        """Whether the server was running at the instant of the call."""
        with self._lock:
            return self._httpd is not None

    def _bind_address(self) -> tuple[str, int]:
        host, sep, port = self._addr.rpartition(":")
        if not sep:
            raise ServeError(f"invalid address: {self._addr}")
        try:
            return host.strip("[]"), int(port)
        except ValueError:
            raise ServeError(f"invalid address: {self._addr}") from None

    def serve(self) -> None:
        """Run the server until ``close`` is called from another thread."""
        with self._lock:
            if self._httpd is not None:
                raise ServeError("the server is running")
            try:
                httpd = _FileServer(self._bind_address(), self._source)
            except OSError as exc:
                raise ServeError(exc) from exc
            self._httpd = httpd
        try:
            httpd.serve_forever()
        finally:
            with self._lock:
                self._httpd = None
            httpd.server_close()

    def close(self) -> None:
        """Stop the server, waiting until it has stopped."""
        with self._lock:
            httpd = self._httpd
        if httpd is not None:
            httpd.shutdown()


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the current directory until interrupted."""
    try:
        path = Path(os.getcwd())
    except OSError as exc:
        print(f"Cannot serve CWD: {exc}", file=sys.stderr)
        return 1
    server = Server.new(path)

    print(f"Serving {path}")
    print(f"See http://{server.addr()}")
    print("Hit CTRL-C to stop")

    try:
        server.serve()
    except KeyboardInterrupt:
        return 0
    except ServeError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0