# ABOUTME: Debug logging helper gated on the DEBUG env var
# ABOUTME: Prints categorized messages to stdout only when debugging is enabled

from surfmetrics.config import Config


def debug_log(message: str, category: str = "SURF") -> None:
    """Print a debug message when Config.DEBUG is on"""
    if Config.DEBUG:
        print(f"[{category}] {message}")
