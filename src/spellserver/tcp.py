# spellserver/tcp.py
from __future__ import annotations
import logging
import socketserver
from typing import BinaryIO, Optional

from spellcore.config import MAX_LINE_BYTES
from spellcore.engine import Engine
from spellcore.errors import FatalStartup
from .session import ConnectionSession

log = logging.getLogger(__name__)


class SocketChannel:
    """Line-oriented text channel over a connected socket's file objects."""
    def __init__(self, rfile: BinaryIO, wfile: BinaryIO) -> None:
        self.rfile = rfile
        self.wfile = wfile

    def send(self, text: str) -> None:
        self.wfile.write(text.encode("utf-8"))
        self.wfile.flush()

    def read_line(self) -> str:
        """
        One line without its terminator; "" when the client has gone away.
        Only the first MAX_LINE_BYTES are kept; the rest of an overlong line is
        read and dropped so it can never be taken as the next reply.
        """
        raw = self.rfile.readline(MAX_LINE_BYTES)
        if raw and not raw.endswith(b"\n"):
            while True:
                rest = self.rfile.readline(MAX_LINE_BYTES)
                if not rest or rest.endswith(b"\n"):
                    break
        return raw.decode("utf-8", errors="replace").rstrip("\r\n")

    def prompt(self, word: str, text: str) -> str:
        self.send(text)
        return self.read_line()


class SessionHandler(socketserver.StreamRequestHandler):
    server: "TextAnalysisServer"

    def setup(self) -> None:
        self.timeout = self.server.read_timeout
        super().setup()

    def handle(self) -> None:
        peer = "%s:%s" % self.client_address[:2]
        log.info("Connection from %s", peer)
        session = ConnectionSession(self.server.engine, SocketChannel(self.rfile, self.wfile), peer)
        try:
            session.run()
        except OSError as e:
            # broken pipe, reset or read timeout: only this client is affected
            log.warning("Session with %s ended: %s", peer, e)
        finally:
            log.info("Closed %s", peer)


class TextAnalysisServer(socketserver.ThreadingTCPServer):
    """Accept loop; one thread per connection, all sharing one Engine."""
    allow_reuse_address = True
    daemon_threads = True

    def __init__(self, address: tuple[str, int], engine: Engine,
                 *, read_timeout: Optional[float] = None) -> None:
        self.engine = engine
        self.read_timeout = read_timeout
        try:
            super().__init__(address, SessionHandler)
        except OSError as e:
            raise FatalStartup(f"Could not listen on {address[0]}:{address[1]}: {e}") from e


def serve(engine: Engine, host: str, port: int, *, read_timeout: Optional[float] = None) -> None:
    """Run the accept loop until interrupted."""
    with TextAnalysisServer((host, port), engine, read_timeout=read_timeout) as srv:
        log.info("Server is running on %s:%d", host, srv.server_address[1])
        try:
            srv.serve_forever()
        except KeyboardInterrupt:
            log.info("Interrupted, shutting down")
