"""A small UDP multiplayer client and the echo server it talks to."""

from __future__ import annotations

import argparse
import logging
import socket
from dataclasses import dataclass
from typing import Optional

from chainquest.config import NetConfig

log = logging.getLogger(__name__)

CONNECT = b"\x01"
DISCONNECT = b"\x02"
DATA = b"\x03"

PING_PAYLOAD = b"ping"
MAX_DATAGRAM = 65535
SERVER_POLL_TIMEOUT = 0.05

Address = tuple[str, int]


@dataclass
class NetState:
    """What the client knows about its connection."""

    connected: bool = False
    last_rtt: int = 0
    last_msg: str = ""


class NetClient:
    """Client side of the session: connects, services events and pings."""

    def __init__(self, config: Optional[NetConfig] = None) -> None:
        self.config = config if config is not None else NetConfig()
        self.state = NetState()
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._linked = False

    def connect(self) -> bool:
        """Send a connection request unless already connected; True if one was sent."""
        if self.state.connected:
            return False
        try:
            if not self._linked:
                self._sock.connect((self.config.host, self.config.port))
                self._linked = True
            self._sock.send(CONNECT)
        except OSError as exc:
            log.debug("Connection attempt failed: %s", exc)
            return False
        return True

    def service(self, timeout: float = 0.005) -> bool:
        """Handle at most one incoming event; True if one was handled."""
        if not self._linked:
            return False
        self._sock.settimeout(timeout)
        try:
            frame = self._sock.recv(MAX_DATAGRAM)
        except OSError:
            return False
        kind, payload = frame[:1], frame[1:]
        if kind == CONNECT:
            self.state.connected = True
            self.state.last_msg = "Connected"
        elif kind == DISCONNECT:
            self.state.connected = False
            self.state.last_msg = "Disconnected"
        elif kind == DATA:
            self.state.last_msg = f"Echo {len(payload)} bytes"
        else:
            return False
        return True

    def ping(self) -> bool:
        """Send a ping when connected; True if it was sent."""
        if not (self.state.connected and self._linked):
            return False
        try:
            self._sock.send(DATA + PING_PAYLOAD)
        except OSError as exc:
            log.debug("Ping failed: %s", exc)
            return False
        return True

    def close(self) -> None:
        if self._linked and self.state.connected:
            try:
                self._sock.send(DISCONNECT)
            except OSError:
                pass
        self.state.connected = False
        self._sock.close()

    def __enter__(self) -> "NetClient":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class EchoServer:
    """Accepts peers and echoes every data packet back to its sender."""

    def __init__(self, host: str = "0.0.0.0", port: int = 8080) -> None:
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._sock.bind((host, port))
        self.peers: set[Address] = set()

    @property
    def address(self) -> Address:
        return self._sock.getsockname()

    @property
    def port(self) -> int:
        return self.address[1]

    def handle(self, data: bytes, addr: Address) -> Optional[bytes]:
        """Process one datagram from a peer and return the reply, if any."""
        kind, payload = data[:1], data[1:]
        if kind == CONNECT:
            self.peers.add(addr)
            log.info("Client connected: %s", addr)
            return CONNECT
        if kind == DISCONNECT:
            if addr in self.peers:
                self.peers.discard(addr)
                log.info("Client disconnected: %s", addr)
            return None
        if kind == DATA and addr in self.peers:
            log.info("Received %d bytes from %s", len(payload), addr)
            return DATA + payload
        return None

    def serve_once(self, timeout: float = SERVER_POLL_TIMEOUT) -> bool:
        """Wait for one datagram and answer it; False if none arrived in time."""
        self._sock.settimeout(timeout)
        try:
            data, addr = self._sock.recvfrom(MAX_DATAGRAM)
        except socket.timeout:
            return False
        except OSError as exc:
            log.debug("Receive failed: %s", exc)
            return False
        reply = self.handle(data, addr)
        if reply is not None:
            try:
                self._sock.sendto(reply, addr)
            except OSError as exc:
                log.debug("Reply to %s failed: %s", addr, exc)
        return True

    def serve_forever(self) -> None:
        while True:
            self.serve_once(SERVER_POLL_TIMEOUT)

    def close(self) -> None:
        for peer in self.peers:
            try:
                self._sock.sendto(DISCONNECT, peer)
            except OSError:
                pass
        self.peers.clear()
        self._sock.close()

    def __enter__(self) -> "EchoServer":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


def server_main(argv: Optional[list[str]] = None) -> int:
    """Run the echo server until interrupted."""
    parser = argparse.ArgumentParser(description="ChainQuest echo server")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    log.info("Starting server on %s:%d", args.host, args.port)
    with EchoServer(args.host, args.port) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            log.info("Server stopped")
    return 0