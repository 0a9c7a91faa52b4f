"""Single-instance coordination: the first process serves, later ones forward their arguments."""

from __future__ import annotations

import contextlib
import os
import socket
import sys
import threading
from typing import Callable, Iterable

__all__ = ["InterProcessCommunicator"]

_IS_WINDOWS = sys.platform.startswith("win")
_IS_LINUX = sys.platform.startswith("linux")
_BUFFER_SIZE = 1024

CommandHandler = Callable[[list[str]], None]


class InterProcessCommunicator:
    """Runs a local server for the first instance of an application.

    Later instances become clients and send their arguments to the server,
    whose ``command_received`` handlers are called with the argument list.
    """

    def __init__(self, app_id: str) -> None:
        self.command_received: list[CommandHandler] = []
        self._server_running = False
        self._thread: threading.Thread | None = None
        self._socket: socket.socket | None = None
        self._listener = None
        if _IS_WINDOWS:
            self._path = "\\\\.\\pipe\\" + app_id
            self._start_pipe_server()
        else:
            self._path = "/tmp/" + app_id
            self._start_socket_server()
        if self._server_running:
            self._thread = threading.Thread(target=self._run_server, daemon=True)
            self._thread.start()

    @property
    def path(self) -> str:
        """The address of the server socket or pipe."""
        return self._path

    def _start_pipe_server(self) -> None:
        from multiprocessing.connection import Listener

        if os.path.exists(self._path):
            return
        try:
            self._listener = Listener(self._path, family="AF_PIPE")
        except OSError as error:
            raise RuntimeError("Unable to start IPC server.") from error
        self._server_running = True

    def _start_socket_server(self) -> None:
        limit = 108 if _IS_LINUX else 104
        if len(self._path.encode()) >= limit:
            raise RuntimeError("Unable to create IPC server. Application ID is too long.")
        try:
            sock = self._new_socket()
        except OSError as error:
            raise RuntimeError("Unable to check IPC server.") from error
        try:
            sock.bind(self._path)
        except OSError:
            sock.close()
            return
        try:
            sock.listen(5)
        except OSError as error:
            sock.close()
            raise RuntimeError("Unable to listen to IPC socket.") from error
        self._socket = sock
        self._server_running = True

    @staticmethod
    def _new_socket() -> socket.socket:
        kind = socket.SOCK_SEQPACKET if _IS_LINUX else socket.SOCK_STREAM
        return socket.socket(socket.AF_UNIX, kind)

    def is_server(self) -> bool:
        """Return True if this instance runs the server."""
        return self._server_running

    def is_client(self) -> bool:
        """Return True if another instance runs the server."""
        return not self._server_running

    def communicate(self, args: Iterable[str], exit_if_client: bool = False) -> bool:
        """Deliver ``args`` to the server.

        On the server the handlers are called directly. On a client the
        arguments are sent over the connection; if ``exit_if_client`` is set
        the process exits afterwards. Returns False if sending failed.
        """
        arguments = list(args)
        if self._server_running:
            self._emit(arguments)
            return True
        if arguments and not self._send(arguments):
            return False
        if exit_if_client:
            sys.exit(0)
        return True

    def _emit(self, args: list[str]) -> None:
        for handler in list(self.command_received):
            handler(args)

    def _send(self, args: list[str]) -> bool:
        if _IS_WINDOWS:
            return self._send_pipe(args)
        with self._new_socket() as sock:
            try:
                sock.connect(self._path)
            except OSError:
                return False
            for arg in args:
                data = arg if _IS_LINUX else arg + "\n"
                try:
                    sock.sendall(data.encode())
                except OSError:
                    return False
        return True

    def _send_pipe(self, args: list[str]) -> bool:
        from multiprocessing.connection import Client

        try:
            conn = Client(self._path, family="AF_PIPE")
        except OSError:
            return False
        with conn:
            for arg in args:
                conn.send_bytes(arg.encode())
        return True

    def _run_server(self) -> None:
        if _IS_WINDOWS:
            self._run_pipe_server()
        else:
            self._run_socket_server()

    def _run_socket_server(self) -> None:
        assert self._socket is not None
        while self._server_running:
            try:
                client, _ = self._socket.accept()
            except OSError:
                if not self._server_running:
                    break
                continue
            with client:
                if not self._server_running:
                    break
                args = self._receive(client)
            self._emit(args)

    @staticmethod
    def _receive(client: socket.socket) -> list[str]:
        if _IS_LINUX:
            args: list[str] = []
            while chunk := client.recv(_BUFFER_SIZE):
                args.append(chunk.decode(errors="replace"))
            return args
        info = bytearray()
        while chunk := client.recv(_BUFFER_SIZE):
            info.extend(chunk)
        if not info:
            return []
        pieces = info.decode(errors="replace").split("\n")
        if pieces[-1] == "":
            pieces.pop()
        return pieces

    def _run_pipe_server(self) -> None:
        while self._server_running:
            try:
                conn = self._listener.accept()
            except OSError:
                if not self._server_running:
                    break
                continue
            with conn:
                if not self._server_running:
                    break
                args: list[str] = []
                while True:
                    try:
                        args.append(conn.recv_bytes().decode(errors="replace"))
                    except (EOFError, OSError):
                        break
            self._emit(args)

    def close(self) -> None:
        """Stop the server, if this instance runs one, and release its address."""
        if not self._server_running:
            return
        self._server_running = False
        if _IS_WINDOWS:
            from multiprocessing.connection import Client

            with contextlib.suppress(OSError):
                Client(self._path, family="AF_PIPE").close()
            with contextlib.suppress(OSError):
                self._listener.close()
        elif self._socket is not None:
            with contextlib.suppress(OSError), self._new_socket() as wake:
                wake.connect(self._path)
            with contextlib.suppress(OSError):
                self._socket.close()
            with contextlib.suppress(OSError):
                os.unlink(self._path)
            self._socket = None
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()
        self._thread = None

    def __enter__(self) -> InterProcessCommunicator:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()