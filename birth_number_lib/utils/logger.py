import logging

from birth_number_lib.base.constants_base import LOG_LEVEL, LOG_MASKED_PREFIX_LEN


def prepare_logger(logger_name: str):
    logger = logging.getLogger(logger_name)
    if not logger.handlers:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(LOG_LEVEL)
    return logger


def mask_code(code) -> str:
    """Hide the birth date part of a birth number before it is logged."""
    if code is None:
        return "<none>"
    code = str(code)
    hidden = min(LOG_MASKED_PREFIX_LEN, len(code))
    return "*" * hidden + code[hidden:]
