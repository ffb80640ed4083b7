import logging
import sys

# 1. Set up a handler and formatter for console output.
# This handler will be used by all loggers that don't have their own handlers.
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(logging.DEBUG)
formatter = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
console_handler.setFormatter(formatter)

# 2. Get the root logger and set its level to INFO.
# Per-iteration estimator messages are DEBUG and stay hidden unless a caller
# lowers the level.
root_logger = logging.getLogger()
root_logger.setLevel(logging.INFO)
root_logger.addHandler(console_handler)

# 3. Suppress chatty library loggers
logging.getLogger("numba").setLevel(logging.WARNING)
