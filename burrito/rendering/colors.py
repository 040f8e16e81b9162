"""
rendering/colors.py - ANSI color markers
"""


class Colors:
    """ANSI color codes for terminal output."""
    RED = "\033[31m"
    YELLOW = "\033[33m"
    RESET = "\033[0m"


def red(text: str, enabled: bool) -> str:
    if not enabled:
        return text
    return f"{Colors.RED}{text}{Colors.RESET}"


def yellow(text: str, enabled: bool) -> str:
    if not enabled:
        return text
    return f"{Colors.YELLOW}{text}{Colors.RESET}"
