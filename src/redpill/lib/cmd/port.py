"""
Port specification utilities for command-line operations
"""
from typing import Iterable, List, Optional

MIN_PORT = 1
MAX_PORT = 65535


def is_valid_port(port: int) -> bool:
    """Validate port number is in valid range"""
    return MIN_PORT <= port <= MAX_PORT


def _to_int(value: str) -> Optional[int]:
    """Parse a plain decimal number, None if it is anything else (no "3000abc" prefixes)"""
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        return None
    return int(value)


def parse_ports(tokens: Iterable[str]) -> List[int]:
    """
    Parse port arguments into a list of port numbers

    Each token is either a single port ("3000") or an inclusive range
    ("3000-3010"). Invalid tokens are dropped individually; order follows
    the tokens and duplicates across tokens are kept.

    Args:
        tokens: Raw port arguments

    Returns:
        List of valid ports
    """
    ports: List[int] = []

    for token in tokens:
        if "-" in token:
            start_str, _, end_str = token.partition("-")
            start = _to_int(start_str)
            end = _to_int(end_str)

            if start is None or end is None or start > end:
                continue
            if not is_valid_port(start) or not is_valid_port(end):
                continue

            ports.extend(range(start, end + 1))
        else:
            port = _to_int(token)
            if port is not None and is_valid_port(port):
                ports.append(port)

    return ports
