"""
Pytest Configuration and Shared Fixtures

This file contains pytest configuration and fixtures that are available
to all test modules.
"""

import pytest


def _mutate_last_digit(number: str) -> str:
    for index in range(len(number) - 1, -1, -1):
        if number[index] in "0123456789":
            replacement = str((int(number[index]) + 1) % 10)
            return number[:index] + replacement + number[index + 1 :]
    raise ValueError(f"No digit to mutate in {number!r}")


@pytest.fixture
def mutate_last_digit():
    """Fixture returning a function that bumps the last digit of a number by one."""
    return _mutate_last_digit


@pytest.fixture
def write_config(tmp_path):
    """Fixture writing YAML text to a temporary config file and returning its path."""

    def _write(text: str):
        path = tmp_path / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
