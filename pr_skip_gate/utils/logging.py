"""Logging setup for hosts that run the gate as their own process.

The package itself never configures logging: the gate and the GitHub fetcher
only write to module loggers. A host that has no logging configuration of its
own calls ``setup_observability()`` once at startup to get readable verdict
and review audit lines, and Logfire forwarding when ``LOGFIRE_TOKEN`` is set.
"""

import logging
import sys

from pr_skip_gate.config.settings import Settings, get_settings

# Loggers whose debug output would bury the per-review audit lines
NOISY_LOGGERS = ("github", "urllib3")


def setup_logging(settings: Settings | None = None) -> None:
    """Send log records to stdout at the configured ``LOG_LEVEL``."""
    if settings is None:
        settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def setup_observability(settings: Settings | None = None) -> None:
    """Configure logging and, with a Logfire token, forward records to Logfire.

    Logfire is an optional extra (``pr-skip-gate[logfire]``). When it is
    missing or fails to configure, the gate keeps logging to stdout.
    """
    if settings is None:
        settings = get_settings()

    setup_logging(settings)
    logger = logging.getLogger(__name__)

    if not settings.logfire_token:
        logger.info("Logfire token not configured, logging to stdout only")
        return

    try:
        import logfire

        logfire.configure(token=settings.logfire_token)
        logging.getLogger().addHandler(logfire.LogfireLoggingHandler())
    except ImportError:
        logger.warning(
            "Logfire package not installed. Install with: pip install 'pr-skip-gate[logfire]'"
        )
    except Exception as e:
        logger.error(f"Failed to setup Logfire observability: {e}")
    else:
        logger.info(f"Gate verdicts forwarded to Logfire ({settings.environment})")
