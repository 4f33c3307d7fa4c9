#!/usr/bin/env python3
"""Basic usage example"""

import time
from pathlib import Path

import simple_logger as log
from simple_logger import LoggerBuilder, LogLevel


def main():
    Path("logs").mkdir(exist_ok=True)

    # Shared default logger, configured once
    log.configure(level_threshold="debug", write_to_file=True, log_directory="logs")

    log.info("Program started")
    log.debug("variable x = false")
    log.warning("variable not set, something bad might happen", "config")

    log.start_timer()
    time.sleep(0.1)
    log.stop_timer()

    print(log.dump_to_string())

    # Independent profile with its own configuration
    errors_only = (LoggerBuilder()
        .with_name("errors")
        .with_level(LogLevel.ERROR)
        .with_console(False)
        .build())
    errors_only.warning("dropped")
    errors_only.error("disk full")
    errors_only.dump_to_file("logs/errors.log")

if __name__ == "__main__":
    main()
