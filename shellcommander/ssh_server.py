#!/usr/bin/env python3
"""
SSH Front End - Serves shell sessions over SSH channels
"""

import codecs
import logging
import os
import signal
import socket
import sys
import threading
from typing import Dict, Optional

import paramiko

from .shell import ShellSession
from .terminal import Terminal

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ShellSSHServer(paramiko.ServerInterface):
    """SSH server interface accepting any login and a single shell channel"""

    def __init__(self, client_ip: str):
        self.client_ip = client_ip
        self.event = threading.Event()
        self.username = None
        self.term_width = 80

    def check_channel_request(self, kind: str, chanid: int) -> int:
        """Accept session channel requests"""
        if kind == 'session':
            return paramiko.OPEN_SUCCEEDED
        return paramiko.OPEN_FAILED_ADMINISTRATIVELY_PROHIBITED

    def check_auth_password(self, username: str, password: str) -> int:
        self.username = username
        logger.info(f"Password login from {self.client_ip}: {username}")
        return paramiko.AUTH_SUCCESSFUL

    def check_auth_publickey(self, username: str, key: paramiko.PKey) -> int:
        self.username = username
        logger.info(f"Public key login from {self.client_ip}: {username} ({key.get_name()})")
        return paramiko.AUTH_SUCCESSFUL

    def get_allowed_auths(self, username: str) -> str:
        return 'password,publickey'

    def check_channel_shell_request(self, channel: paramiko.Channel) -> bool:
        self.event.set()
        return True

    def check_channel_pty_request(self, channel: paramiko.Channel, term: str,
                                  width: int, height: int, pixelwidth: int,
                                  pixelheight: int, modes: bytes) -> bool:
        self.term_width = width
        return True


class ChannelTerminal(Terminal):
    """Terminal that reads and writes an SSH channel"""

    def __init__(self, channel: paramiko.Channel):
        self.channel = channel
        self.prompt = ''
        self.running = True
        self.decoder = codecs.getincrementaldecoder('utf-8')(errors='replace')

    def send(self, data: str):
        """Send data to the client"""
        try:
            self.channel.send(data.encode('utf-8'))
        except OSError as e:
            logger.info(f"Channel closed while sending: {e}")
            self.running = False

    def recv(self, size: int = 1) -> Optional[str]:
        """Read decoded text, None at end of stream.

        Returns '' while a multi-byte character is still incomplete.
        """
        try:
            data = self.channel.recv(size)
        except OSError as e:
            logger.info(f"Channel closed while reading: {e}")
            self.running = False
            return None
        if not data:
            return None
        return self.decoder.decode(data)

    def echo(self, line: str):
        self.send(line + '\r\n')

    def set_prompt(self, prompt: str):
        self.prompt = prompt

    def read_line(self) -> Optional[str]:
        """Read one line with basic editing, None once the client is gone"""
        line = ''
        while True:
            char = self.recv(1)

            if char is None:
                self.running = False
                return None
            if not char:
                continue

            if char == '\r' or char == '\n':
                self.send('\r\n')
                return line
            elif char == '\x7f' or char == '\x08':  # Backspace
                if line:
                    line = line[:-1]
                    self.send('\x08 \x08')
            elif char == '\x03':  # Ctrl+C
                self.send('^C\r\n')
                return ''
            elif char == '\x04':  # Ctrl+D
                if not line:
                    self.running = False
                    return None
            elif char == '\x15':  # Ctrl+U
                self.send('\r' + ' ' * (len(self.prompt) + len(line)) + '\r' + self.prompt)
                line = ''
            elif ord(char) >= 32:
                line += char
                self.send(char)

    def run(self, session: ShellSession):
        """Prompt, read and submit lines until the client leaves"""
        self.prompt = session.compute_prompt()
        while self.running:
            self.send(self.prompt)
            line = self.read_line()
            if line is None:
                break
            session.submit(line)


class ShellCommanderSSH:
    """Accepts SSH connections and runs one shell session per client"""

    def __init__(self, host: str = '0.0.0.0', port: int = 2222,
                 key_file: str = 'config/host_key_rsa'):
        self.host = host
        self.port = port
        self.key_file = key_file
        self.server_socket = None
        self.running = False
        self.active_sessions: Dict[str, threading.Thread] = {}

        self._setup_host_key()

    def _setup_host_key(self):
        """Generate or load RSA host key"""
        if not os.path.exists(self.key_file):
            logger.info("Generating new host key...")
            key = paramiko.RSAKey.generate(2048)
            key_dir = os.path.dirname(self.key_file)
            if key_dir:
                os.makedirs(key_dir, exist_ok=True)
            key.write_private_key_file(self.key_file)
            logger.info(f"Host key saved to {self.key_file}")
        else:
            logger.info(f"Loading existing host key from {self.key_file}")
        self.host_key = paramiko.RSAKey(filename=self.key_file)

    def handle_client(self, client_socket: socket.socket, client_ip: str, client_port: int):
        """Handle individual client connections"""
        logger.info(f"New connection from {client_ip}:{client_port}")

        transport = None
        try:
            transport = paramiko.Transport(client_socket)
            transport.add_server_key(self.host_key)

            server = ShellSSHServer(client_ip)
            transport.start_server(server=server)

            channel = transport.accept(30)
            if channel is None:
                logger.warning(f"No channel established for {client_ip}")
                return

            server.event.wait(10)
            if not server.event.is_set():
                logger.warning(f"No shell request from {client_ip}")
                channel.close()
                return

            terminal = ChannelTerminal(channel)
            session = ShellSession(terminal)

            logger.info(f"Starting shell session for {server.username}@{client_ip}")
            terminal.run(session)
            channel.close()
            logger.info(f"Session for {client_ip}:{client_port} ended")

        except (paramiko.SSHException, OSError) as e:
            logger.error(f"Error handling client {client_ip}: {e}")
        finally:
            if transport:
                transport.close()
            client_socket.close()

    def start(self):
        """Start listening and serve clients until stopped"""
        self.running = True

        try:
            self.server_socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
            self.server_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self.server_socket.bind((self.host, self.port))
            self.server_socket.listen(100)

            logger.info(f"Shell Commander SSH listening on {self.host}:{self.port}")

            while self.running:
                try:
                    client_socket, (client_ip, client_port) = self.server_socket.accept()
                except OSError as e:
                    if self.running:
                        logger.error(f"Error accepting connection: {e}")
                    continue

                client_thread = threading.Thread(
                    target=self.handle_client,
                    args=(client_socket, client_ip, client_port),
                    daemon=True
                )
                client_thread.start()
                self.active_sessions[f"{client_ip}:{client_port}"] = client_thread

        except OSError as e:
            logger.error(f"Server error: {e}")
        finally:
            self.stop()

    def stop(self):
        """Stop accepting clients and wait for open sessions"""
        if not self.running:
            return
        logger.info("Stopping Shell Commander SSH...")
        self.running = False

        if self.server_socket:
            self.server_socket.close()

        for session_key, thread in list(self.active_sessions.items()):
            logger.info(f"Waiting for session {session_key} to complete...")
            thread.join(timeout=5)

        logger.info("Shell Commander SSH stopped")


def main():
    """Main entry point"""
    logging.basicConfig(
        level=os.getenv('SHELLCOMMANDER_LOG_LEVEL', 'INFO').upper(),
        format=LOG_FORMAT
    )

    server = ShellCommanderSSH(
        host=os.getenv('SHELLCOMMANDER_SSH_HOST', '0.0.0.0'),
        port=int(os.getenv('SHELLCOMMANDER_SSH_PORT', '2222')),
        key_file=os.getenv('SHELLCOMMANDER_HOST_KEY', 'config/host_key_rsa')
    )

    def signal_handler(signum, frame):
        logger.info("Received shutdown signal")
        server.stop()
        sys.exit(0)

    signal.signal(signal.SIGTERM, signal_handler)
    signal.signal(signal.SIGINT, signal_handler)

    server.start()


if __name__ == '__main__':
    main()
