"""
Hostname extraction for network tools.

People paste whole URLs into ``dig``, ``ping`` or ``whois``; these helpers
reduce such arguments to the bare hostname while leaving plain hostnames,
IP addresses and CIDR blocks alone.
"""

from typing import List
from urllib.parse import urlsplit


URL_SCHEMES = ("http://", "https://", "ftp://", "ftps://")


def looks_like_url(s: str) -> bool:
    """
    Return True if *s* might be a URL that needs hostname extraction.

    Matches anything with a scheme and ``domain.tld/path`` shapes, but not
    file paths (``/usr/local``) or CIDR notation (``192.0.2.0/24``).
    """
    if s.startswith(URL_SCHEMES) or "://" in s:
        return True

    if "/" in s and "." in s:
        parts = s.split("/")
        if "." in parts[0]:
            # IP/prefix is CIDR notation, not a URL
            if len(parts) == 2 and parts[1].isdigit():
                return False
            return True

    return False


def _hostname(netloc: str) -> str:
    """Strip credentials, port and IPv6 brackets from a URL authority."""
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        end = host.find("]")
        return host[1:end] if end != -1 else ""
    return host.partition(":")[0]


def extract_hostname(value: str) -> str:
    """
    Extract the hostname from a URL string.

    - ``https://example.com/path``       -> ``example.com``
    - ``http://example.com:8080``        -> ``example.com``
    - ``example.com/page.html``          -> ``example.com``
    - plain hostnames, IPs, CIDR blocks  -> unchanged

    Never raises; anything that cannot be parsed is returned unchanged.
    """
    if not value or not looks_like_url(value):
        return value

    try:
        parsed = urlsplit(value)
        if not parsed.scheme and not parsed.netloc:
            if "/" not in value and "?" not in value:
                return value
            parsed = urlsplit("http://" + value)
        hostname = _hostname(parsed.netloc)
    except ValueError:
        return value

    return hostname or value


def process_args(args: List[str]) -> List[str]:
    """
    Extract hostnames from URL arguments, leaving flags untouched.

    Returns a new list of the same length; only positional arguments (those
    not starting with ``-``) are candidates for rewriting.
    """
    result = list(args)
    for i, arg in enumerate(result):
        if arg.startswith("-"):
            continue
        result[i] = extract_hostname(arg)
    return result
