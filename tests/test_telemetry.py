#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Tests for logging setup."""

from __future__ import annotations

from unittest.mock import Mock, patch

from bytemask import setup_logging
from bytemask.config import BytemaskRuntimeConfig, set_config


class TestSetupLogging:
    """Test setup_logging()."""

    @patch("bytemask.telemetry.get_hub")
    def test_initializes_foundation(self, mock_get_hub: Mock) -> None:
        telemetry = setup_logging(BytemaskRuntimeConfig(log_level="debug"))

        mock_get_hub.return_value.initialize_foundation.assert_called_once_with(telemetry)
        assert telemetry.service_name == "bytemask"
        assert telemetry.logging.default_level == "DEBUG"

    @patch("bytemask.telemetry.get_hub")
    def test_uses_active_config(self, mock_get_hub: Mock) -> None:
        set_config(BytemaskRuntimeConfig(log_level="error"))

        telemetry = setup_logging()

        assert telemetry.logging.default_level == "ERROR"
        mock_get_hub.return_value.initialize_foundation.assert_called_once()


# 🎭📦🔚
