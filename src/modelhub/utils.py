"""Utility functions for modelhub."""

import logging


def setup_logger(name: str, verbose: bool = False) -> logging.Logger:
    """Set up and return a configured logger instance.

    Args:
        name: Logger name.
        verbose: If True, sets log level to DEBUG.

    Returns:
        Configured logging.Logger instance.
    """
    logger = logging.getLogger(name)
    handler = logging.StreamHandler()
    formatter = logging.Formatter('%(levelname)s: %(message)s')

    if not logger.handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger


def mask_api_key(api_key: str, visible_chars: int = 4) -> str:
    """Mask an API key for safe display.

    Example: ``"sk-abcdefghijk"`` -> ``"sk-*******hijk"``

    Keys too short to keep a prefix and suffix around at least four hidden
    characters are shown with fewer (or no) visible characters.
    """
    if not api_key:
        return ""
    prefix_len = 3
    if len(api_key) < prefix_len + visible_chars + 4:
        prefix_len = 0
        visible_chars = min(visible_chars, max(len(api_key) - 4, 0))
    prefix = api_key[:prefix_len]
    suffix = api_key[len(api_key) - visible_chars:] if visible_chars else ""
    hidden_len = len(api_key) - prefix_len - visible_chars
    return f"{prefix}{'*' * max(hidden_len, 4)}{suffix}"
