# Emulator link settings
HOST = '127.0.0.1'
PORT = 12345
BUFFER_SIZE = 256

LOG_DIR = 'log'

CONNECTED_MSG = "Connected to Gameboy emulator."
RECEIVED_PREFIX = "Received from Gameboy emulator: "
INIT_FAILED_MSG = "Network initialization failed."
SOCKET_FAILED_MSG = "Socket creation failed."
CONNECT_FAILED_MSG = "Connection failed."
RECV_FAILED_MSG = "Receive failed."
