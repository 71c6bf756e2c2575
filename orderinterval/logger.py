"""
orderinterval.logger

The loguru logger used throughout the package.

Library code only logs through `log`; the records go nowhere until
`initialize` is called, which the command line does.

"""

import sys

from loguru import logger as log

LEVELS = ["SUCCESS", "INFO", "DEBUG", "TRACE"]

log.disable("orderinterval")


def initialize(verbose: int):
    level = LEVELS[min(verbose, len(LEVELS) - 1)]
    log.remove()
    log.add(sys.stderr, format="[{level}] {message}", level=level)
    log.enable("orderinterval")
    log.debug(f"Logging at {level}")
