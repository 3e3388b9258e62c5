#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Shared pytest fixtures for bytemask tests."""

from __future__ import annotations

from collections.abc import Iterator
import os

import provide.testkit  # noqa: F401 - Installs setproctitle blocker early
from provide.testkit.logger import reset_foundation_setup_for_testing
import pytest

from bytemask.config import reset_config


@pytest.fixture(autouse=True)
def reset_foundation_logging() -> Iterator[None]:
    """Reset foundation logging state before each test to avoid conflicts."""
    reset_foundation_setup_for_testing()
    yield
    reset_foundation_setup_for_testing()


@pytest.fixture(autouse=True)
def clean_bytemask_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test a fresh configuration loaded from a clean environment."""
    for name in list(os.environ):
        if name.startswith("BYTEMASK_"):
            monkeypatch.delenv(name)
    reset_config()
    yield
    reset_config()


# 🎭📦🔚
