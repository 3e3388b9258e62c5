#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Logging setup for applications embedding bytemask."""

from __future__ import annotations

from attrs import evolve
from provide.foundation import TelemetryConfig, get_hub

from bytemask.config import BytemaskRuntimeConfig, get_config
from bytemask.config.defaults import SERVICE_NAME


def setup_logging(config: BytemaskRuntimeConfig | None = None) -> TelemetryConfig:
    """Initialize Foundation logging with the bytemask log level.

    Configure via environment variables:
    - BYTEMASK_LOG_LEVEL: Log level for bytemask (trace, debug, info, warning, error)
    - PROVIDE_LOG_FILE: Write logs to file
    """
    if config is None:
        config = get_config()

    base_telemetry = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_telemetry,
        service_name=SERVICE_NAME,
        logging=evolve(
            base_telemetry.logging,
            default_level=config.log_level,  # type: ignore[arg-type]
        ),
    )

    hub = get_hub()
    hub.initialize_foundation(telemetry_config)
    return telemetry_config


# 🎭📦🔚
