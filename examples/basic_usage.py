#!/usr/bin/env python3
"""Basic usage example"""

import warnings

from log_dispatch import ErrorHandler, LoggerBuilder, LogLevel
from log_dispatch.writers import MockWriter


class Digits:
    """Validator accepting purely numeric messages."""

    def is_valid(self, value):
        return value.isdigit()


def main():
    audit = MockWriter()
    audit.add_filter("validator", {"validator": Digits()})

    # Create logger with builder pattern
    logger = (LoggerBuilder()
        .with_name("example")
        .with_console(colored=True, priority=2)
        .add_writer("stream", 1, {
            "stream": "stdout",
            "formatter": "json",
            "filters": [{"name": "priority", "options": {"priority": "err"}}],
        })
        .add_writer(audit)
        .build())

    # Log messages
    logger.debug("This is debug")
    logger.info("Application started", {"pid": 4242})
    logger.notice(["user", "login"])
    logger.warn("This is warning")
    logger.err("This is error")
    logger.log(LogLevel.CRIT, "123")

    print(f"audit writer kept {len(audit.events)} entry")

    # Route warnings through the logger
    with ErrorHandler.registered(logger):
        warnings.warn("disk almost full", RuntimeWarning)

    logger.flush()
    logger.shutdown()


if __name__ == "__main__":
    main()
