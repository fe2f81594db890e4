import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "BIRTH_NUMBER_"


# Logging level used by loggers created with ``prepare_logger``
LOG_LEVEL = (
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO").strip().upper()
)

# Number of leading characters hidden when a birth number is logged
LOG_MASKED_PREFIX_LEN = 6
