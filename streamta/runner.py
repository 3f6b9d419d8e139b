# streamta/runner.py
"""
Pipeline execution and logging setup.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Iterable

from .config import load_indicator_config, settings
from .factory import create_indicator

log = logging.getLogger(__name__)


def configure_logging(level: str = "INFO", force: bool = False) -> None:
    """
    Configure root logger with console output.

    By default, this is non-destructive: if the root logger already has handlers,
    it will do nothing (assuming the application has configured logging).

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        force: If True, clear existing handlers and force this configuration
    """
    root_logger = logging.getLogger()

    if root_logger.hasHandlers() and not force:
        return

    root_logger.setLevel(level.upper())

    if force:
        root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def run_pipeline(
    config: dict[str, Any] | str | Path | None,
    inputs: Iterable,
    *,
    records: bool = False,
    setup_logging: bool = False,
) -> list:
    """
    Build an indicator from ``config`` and run it over ``inputs``.

    Args:
        config: Indicator mapping, or path to a YAML file holding one.
            None falls back to ``settings.config_path`` (STREAMTA_CONFIG).
        inputs: Scalars (or market data records when ``records`` is True)
        records: Feed inputs through ``update_from``
        setup_logging: Configure console logging from ``settings.log_level``

    Returns:
        One output per input, in order

    Raises:
        ValueError: If no config is given and STREAMTA_CONFIG is unset

    Example:
        outputs = run_pipeline({"type": "sma", "period": 3}, [1.0, 2.0, 3.0])
    """
    if setup_logging:
        settings.validate()
        configure_logging(settings.log_level)

    if config is None:
        if not settings.config_path:
            raise ValueError("No indicator config given and STREAMTA_CONFIG is not set")
        config = settings.config_path
        log.debug("Using indicator config from STREAMTA_CONFIG: %s", config)

    if isinstance(config, (str, Path)):
        config = load_indicator_config(config)

    indicator = create_indicator(config)
    log.info("Running %r", indicator)

    outputs = list(indicator.iter_over(inputs, records=records))

    log.info("Processed %d input%s", len(outputs), "s" if len(outputs) != 1 else "")
    return outputs
