"""
Demo entry point: adds two sample amounts, prints the total and
compares it with $9.25.
"""

import sys
from typing import TextIO

from .config import get_config
from .currency import CurrencyValue
from .logging_config import setup_logging, get_logger, log_action

EXPECTED_TOTAL = CurrencyValue(9, 25)


def run_demo(stream: TextIO) -> CurrencyValue:
    """Write the demo's two output lines to stream and return the total"""
    logger = get_logger("cashbox.demo")

    first = CurrencyValue(5, 75)
    second = CurrencyValue(3, 50)
    total = first + second
    log_action(logger, "info", "Added sample amounts", action="add",
               resource="currency_value",
               extra={"first": str(first), "second": str(second), "total": str(total)})

    stream.write(f"Total: {total}\n")

    if total == EXPECTED_TOTAL:
        stream.write(f"Equal to {EXPECTED_TOTAL}\n")
    else:
        stream.write("Not equal\n")

    return total


def main() -> int:
    cfg = get_config()
    setup_logging(level=cfg.log_level, logger_name=cfg.logger_name,
                  log_format=cfg.log_format)
    run_demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
