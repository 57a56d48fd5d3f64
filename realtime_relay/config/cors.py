"""
CORS policy built from origin patterns.

Patterns are plain origins (``http://localhost:4200``), origins with ``*``
wildcards (``https://realtime-voice-assistant-*.vercel.app``) or origins ending
in a port list (``http://localhost:[*]``, ``https://app.example.com:[8080,8443]``).
Plain origins go to Starlette's exact allow-list, every other pattern is folded
into a single anchored ``allow_origin_regex``.
"""

import re
from typing import Any, Dict, List, Optional

from realtime_relay.config.constants import CORS_ALLOWED_METHODS

PORT_LIST_PATTERN = re.compile(r":\[([^\]]*)\]$")


def is_origin_pattern(pattern: str) -> bool:
    """True if the pattern needs regex matching rather than an exact comparison."""
    return "*" in pattern or PORT_LIST_PATTERN.search(pattern) is not None


def pattern_to_regex(pattern: str) -> str:
    """
    Translate one origin pattern into a regular expression fragment.

    ``[*]`` as the port list matches any port or none; an explicit list matches
    only those ports.
    """
    port_regex = ""
    match = PORT_LIST_PATTERN.search(pattern)
    if match:
        pattern = pattern[:match.start()]
        ports = [p.strip() for p in match.group(1).split(",") if p.strip()]
        if not ports or "*" in ports:
            port_regex = r"(?::\d+)?"
        else:
            port_regex = ":(?:" + "|".join(re.escape(p) for p in ports) + ")"
    host_regex = ".*".join(re.escape(part) for part in pattern.split("*"))
    return host_regex + port_regex


def build_cors_options(patterns: List[str]) -> Dict[str, Any]:
    """
    Build keyword arguments for ``CORSMiddleware`` from origin patterns.

    Args:
        patterns: Trimmed origin patterns, e.g. from ``RelaySettings.allowed_origin_patterns``

    Returns:
        dict: Options accepted by ``app.add_middleware(CORSMiddleware, **options)``
    """
    exact: List[str] = []
    wildcard: List[str] = []
    for pattern in patterns:
        if pattern == "*":
            exact = ["*"]
            wildcard = []
            break
        if is_origin_pattern(pattern):
            wildcard.append(pattern)
        else:
            exact.append(pattern)

    origin_regex: Optional[str] = None
    if wildcard:
        origin_regex = "^(?:" + "|".join(pattern_to_regex(p) for p in wildcard) + ")$"

    return {
        "allow_origins": exact,
        "allow_origin_regex": origin_regex,
        "allow_credentials": False,
        "allow_methods": list(CORS_ALLOWED_METHODS),
        "allow_headers": ["*"],
    }
