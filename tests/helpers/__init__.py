"""Test helper utilities for the gitpane test suite."""

from tests.helpers.cli_assertions import (
    assert_command_failed,
    assert_command_success,
    assert_output_contains,
)
from tests.helpers.fakes import FakeRunner, RecordingHost

__all__ = [
    "assert_command_success",
    "assert_command_failed",
    "assert_output_contains",
    "FakeRunner",
    "RecordingHost",
]
