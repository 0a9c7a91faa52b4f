import threading
import uuid

import pytest

from aurakit.ipc import InterProcessCommunicator


def _app_id() -> str:
    return f"aurakit-test-{uuid.uuid4().hex[:12]}"


def test_first_instance_is_server():
    with InterProcessCommunicator(_app_id()) as ipc:
        assert ipc.is_server() is True
        assert ipc.is_client() is False


def test_second_instance_is_client():
    app_id = _app_id()
    with InterProcessCommunicator(app_id) as server, InterProcessCommunicator(app_id) as client:
        assert server.is_server()
        assert client.is_client()
        assert not client.is_server()


def test_server_communicate_calls_handlers_directly():
    received = []
    with InterProcessCommunicator(_app_id()) as server:
        server.command_received.append(received.append)
        assert server.communicate(["open", "file.txt"]) is True
    assert received == [["open", "file.txt"]]


def test_client_arguments_reach_server():
    app_id = _app_id()
    received = []
    done = threading.Event()

    def handler(args):
        received.append(args)
        done.set()

    with InterProcessCommunicator(app_id) as server:
        server.command_received.append(handler)
        with InterProcessCommunicator(app_id) as client:
            assert client.communicate(["first", "second"]) is True
        assert done.wait(5)
    assert received == [["first", "second"]]


def test_client_with_no_args_succeeds_without_sending():
    app_id = _app_id()
    received = []
    with InterProcessCommunicator(app_id) as server:
        server.command_received.append(received.append)
        with InterProcessCommunicator(app_id) as client:
            assert client.communicate([]) is True
    assert received == []


def test_exit_if_client_exits():
    app_id = _app_id()
    with InterProcessCommunicator(app_id), InterProcessCommunicator(app_id) as client:
        with pytest.raises(SystemExit) as info:
            client.communicate([], exit_if_client=True)
    assert info.value.code == 0


def test_close_releases_the_address():
    app_id = _app_id()
    first = InterProcessCommunicator(app_id)
    assert first.is_server()
    first.close()
    with InterProcessCommunicator(app_id) as second:
        assert second.is_server()


def test_too_long_id_is_rejected():
    with pytest.raises(RuntimeError):
        InterProcessCommunicator("x" * 200)