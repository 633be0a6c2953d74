"""
MUST HAVE REQUIREMENTS:
- Emit key/value events through structlog on top of stdlib logging.
- Stay silent on import; only configure_logging attaches a handler.
- Read the default level from RICHTEXT_LOG_LEVEL (WARNING when unset).
"""
import logging
import os

import structlog

PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.JSONRenderer(),
]


def get_logger(name):
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(level=None):
    level = level or os.environ.get("RICHTEXT_LOG_LEVEL", "WARNING")
    logging.basicConfig(level=level.upper(), format="%(message)s")
