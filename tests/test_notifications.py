import dataclasses

import pytest

from aurakit.notifications import (
    NotificationSentEventArgs,
    NotificationSeverity,
    ShellNotificationSentEventArgs,
)


def test_defaults_for_action():
    args = NotificationSentEventArgs("Saved", NotificationSeverity.SUCCESS)
    assert args.message == "Saved"
    assert args.severity is NotificationSeverity.SUCCESS
    assert args.action == ""
    assert args.action_param == ""


def test_severity_coerced_from_int():
    args = NotificationSentEventArgs("Oops", 3)
    assert args.severity is NotificationSeverity.ERROR


def test_invalid_severity_rejected():
    with pytest.raises(ValueError):
        NotificationSentEventArgs("Oops", 9)


def test_args_are_frozen():
    args = NotificationSentEventArgs("m", NotificationSeverity.WARNING)
    with pytest.raises(dataclasses.FrozenInstanceError):
        args.message = "other"
    assert args.message == "m"
    assert args.severity is NotificationSeverity.WARNING


def test_shell_args_fields():
    args = ShellNotificationSentEventArgs(
        "Download", "Finished", NotificationSeverity.INFORMATIONAL, "open", "/tmp/file"
    )
    assert args.title == "Download"
    assert args.message == "Finished"
    assert args.severity is NotificationSeverity.INFORMATIONAL
    assert args.action == "open"
    assert args.action_param == "/tmp/file"
    assert isinstance(args, NotificationSentEventArgs)


def test_shell_args_equality_includes_title():
    first = ShellNotificationSentEventArgs("A", "m", NotificationSeverity.SUCCESS)
    same = ShellNotificationSentEventArgs("A", "m", NotificationSeverity.SUCCESS)
    other = ShellNotificationSentEventArgs("B", "m", NotificationSeverity.SUCCESS)
    assert first == same
    assert (first == other) is False


def test_shell_args_coerce_severity():
    args = ShellNotificationSentEventArgs("t", "m", 2)
    assert args.severity is NotificationSeverity.WARNING