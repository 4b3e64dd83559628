"""Debug logging setup for the CLI."""

import logging
import os

DEBUG_ENV_VAR = "PROOT_DEBUG"


def debug_enabled(flag: bool) -> bool:
    """Debug output is on if requested by flag or by $PROOT_DEBUG."""
    return flag or bool(os.getenv(DEBUG_ENV_VAR))


def configure_logging(debug: bool) -> None:
    """Route log records to stderr at DEBUG level when debugging is enabled.

    Without debug, logging stays unconfigured so only warnings reach stderr.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")
