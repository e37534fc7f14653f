#!/usr/bin/env python3
"""Serve scripted payloads the way the emulator link would."""
import argparse
import contextlib
import logging
import socketserver
import threading
import time

logging.basicConfig(level=logging.INFO)
LOG = logging.getLogger('test_server')
LOG.setLevel(logging.INFO)


class PayloadHandler(socketserver.BaseRequestHandler):
    """
    Write each payload to the client, pausing between writes, then return so
    the server closes the connection.
    """
    payloads = ()
    delay = 0.0

    def handle(self):
        for payload in self.payloads:
            self.request.sendall(payload)
            LOG.debug("Sent %d bytes", len(payload))
            if self.delay:
                time.sleep(self.delay)
        LOG.info("All payloads sent...closing...")


@contextlib.contextmanager
def serve_payloads(payloads, delay=0.0, host="127.0.0.1", port=0):
    """Serve one connection per accept from a background thread.

    Yields the (host, port) the server is bound to.
    """
    handler = type('Handler', (PayloadHandler,),
                   {'payloads': tuple(payloads), 'delay': delay})
    server = socketserver.TCPServer((host, port), handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield server.server_address
    finally:
        server.shutdown()
        server.server_close()
        thread.join()


if __name__ == "__main__":
    parser = argparse.ArgumentParser()  # pylint: disable=invalid-name
    parser.add_argument("--port", default=12345, type=int)
    parser.add_argument("message", nargs='*', default=["hello"])
    args = parser.parse_args()  # pylint: disable=invalid-name
    with serve_payloads([m.encode('utf-8') for m in args.message],
                        delay=0.5, port=args.port) as addr:
        LOG.info('Serving at %s:%s...', *addr)
        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            pass
