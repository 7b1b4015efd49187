"""Unit tests for exit codes."""

import pytest

from focuspro_cli.utils import exit_codes
from focuspro_cli.utils.exit_codes import get_exit_code_description, get_exit_code_name


def test_codes_are_distinct():
    codes = [
        exit_codes.SUCCESS,
        exit_codes.ERROR_GENERAL,
        exit_codes.ERROR_INVALID_ARGS,
        exit_codes.ERROR_INVALID_STATE,
        exit_codes.ERROR_STORAGE,
    ]
    assert len(set(codes)) == len(codes)
    assert exit_codes.SUCCESS == 0


@pytest.mark.parametrize(
    "code,name",
    [
        (0, "SUCCESS"),
        (1, "ERROR_GENERAL"),
        (2, "ERROR_INVALID_ARGS"),
        (3, "ERROR_INVALID_STATE"),
        (4, "ERROR_STORAGE"),
    ],
)
def test_get_exit_code_name(code, name):
    assert get_exit_code_name(code) == name


def test_unknown_code_name():
    assert get_exit_code_name(99) == "UNKNOWN(99)"


def test_descriptions():
    assert "timer state" in get_exit_code_description(exit_codes.ERROR_INVALID_STATE)
    assert get_exit_code_description(99) == "Unknown error"
