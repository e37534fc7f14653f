"""
Receiver for the emulator link.

Connects to the emulator over TCP and prints every chunk it sends until the
emulator closes the connection.
"""
import logging
import socket
import sys
from typing import Iterator, Optional, TextIO, Tuple

from gbdriver import get_logger
from gbdriver.config import (HOST, PORT, BUFFER_SIZE, CONNECTED_MSG,
                             RECEIVED_PREFIX, INIT_FAILED_MSG,
                             SOCKET_FAILED_MSG, CONNECT_FAILED_MSG,
                             RECV_FAILED_MSG)

LOG = get_logger(logging.getLogger('gb_receiver'))
LOG.setLevel(logging.INFO)


class ReceiverException(Exception):
    """Base class for receiver failures."""


class NetworkInitError(ReceiverException):
    """Throw this exception when the endpoint cannot be resolved."""


class SocketCreateError(ReceiverException):
    """Throw this exception when the OS refuses to create a socket."""


class ConnectFailedError(ReceiverException):
    """Throw this exception when the connection attempt fails."""


class ReceiveError(ReceiverException):
    """Throw this exception when a socket read fails."""


def resolve_endpoint(host: str, port: int) -> Tuple[str, int]:
    """Resolve host/port to an IPv4 stream address."""
    try:
        info = socket.getaddrinfo(host, port, socket.AF_INET,
                                  socket.SOCK_STREAM)
    except (socket.gaierror, UnicodeError) as err:
        raise NetworkInitError(f"Could not resolve {host}:{port}") from err
    return info[0][4][:2]


def format_chunk(chunk: bytes) -> str:
    """Render exactly the received bytes as printable text."""
    return RECEIVED_PREFIX + chunk.decode('utf-8', errors='replace')


class LoopbackReceiver:
    """Syncronous socket reader owning a single connection."""
    def __init__(self, host=HOST, port=PORT, bufsize=BUFFER_SIZE):
        self.host = host
        self.port = port
        self.bufsize = bufsize
        self.sock: Optional[socket.socket] = None

    def __enter__(self):
        if self.sock is None:
            self.open_connection()
        return self

    def __exit__(self, *exc):
        self.close()

    def open_connection(self):
        """Create the socket and connect to the remote server."""
        self.close()
        addr = resolve_endpoint(self.host, self.port)
        try:
            self.sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        except OSError as err:
            raise SocketCreateError(str(err)) from err
        try:
            LOG.info(f'Opening connection to {addr[0]}:{addr[1]}...')
            self.sock.connect(addr)
        except OSError as err:
            self.close()
            raise ConnectFailedError(str(err)) from err
        LOG.info('Connection opened...')

    def read_stream(self) -> Iterator[bytes]:
        """Yield chunks of at most bufsize bytes until the peer closes."""
        while True:
            try:
                data = self.sock.recv(self.bufsize)
            except OSError as err:
                raise ReceiveError(str(err)) from err
            if not data:
                LOG.info('Peer closed the connection...')
                return
            LOG.debug('Received %d bytes', len(data))
            yield data

    def close(self):
        if self.sock is not None:
            self.sock.close()
            self.sock = None


def main(host=HOST, port=PORT, out: TextIO = None) -> int:
    """Connect, print everything received, and return the exit status."""
    if out is None:
        out = sys.stdout
    try:
        receiver = LoopbackReceiver(host, port)
        receiver.open_connection()
    except NetworkInitError as err:
        LOG.error(f"{err}: {err.__cause__}")
        print(INIT_FAILED_MSG, file=out)
        return 1
    except SocketCreateError as err:
        LOG.error(err)
        print(SOCKET_FAILED_MSG, file=out)
        return 1
    except ConnectFailedError as err:
        LOG.error(err)
        print(CONNECT_FAILED_MSG, file=out)
        return 1

    with receiver:
        print(CONNECTED_MSG, file=out, flush=True)
        try:
            for chunk in receiver.read_stream():
                print(format_chunk(chunk), file=out, flush=True)
        except ReceiveError as err:
            LOG.error(err)
            print(RECV_FAILED_MSG, file=out, flush=True)
    LOG.info('Exiting receiver!')
    return 0
