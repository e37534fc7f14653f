#!/usr/bin/env python3
"""Start the emulator link receiver."""
import argparse
import logging
import sys

from gbdriver import client, get_logger
from gbdriver.config import HOST, PORT, LOG_DIR


def str2bool(val):
    """Better bool arg handling."""
    if isinstance(val, bool):
        return val
    if val.lower() in ('yes', 'true', 't', 'y', '1'):
        return True
    if val.lower() in ('no', 'false', 'f', 'n', '0'):
        return False
    raise argparse.ArgumentTypeError('Boolean value expected.')


def port_number(val):
    """Port arg handling, rejecting values outside 0-65535."""
    try:
        port = int(val)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid port: {val}")
    if not 0 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"Port out of range: {port}")
    return port


def parse_args(argv=None):
    parser = argparse.ArgumentParser()  # pylint: disable=invalid-name
    parser.add_argument("--host", default=HOST, type=str,
                        help="Address of the emulator to connect to.")
    parser.add_argument("--port", default=PORT, type=port_number,
                        help="Port the emulator is listening on.")
    parser.add_argument("--debug", default=False, type=str2bool,
                        help="If true, log every read and write the log to "
                        f"{LOG_DIR}/.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="backslashreplace")
    if args.debug:
        get_logger(client.LOG, log_dir=LOG_DIR)
        client.LOG.setLevel(logging.DEBUG)
    return client.main(host=args.host, port=args.port)


if __name__ == '__main__':
    sys.exit(main())
