"""Webhook source check: only accept requests from Telegram's networks.

Telegram sends webhook requests from the ranges published at
https://core.telegram.org/bots/webhooks#the-short-version.
"""

import ipaddress
import sys
from collections.abc import Mapping

TELEGRAM_NETWORKS = (
    ipaddress.ip_network("149.154.160.0/20"),
    ipaddress.ip_network("91.108.4.0/22"),
)

# Checked in order; the first valid address wins
ADDRESS_KEYS = ("HTTP_CLIENT_IP", "HTTP_X_FORWARDED_FOR", "REMOTE_ADDR")


def _valid_ip(value: str | None) -> str | None:
    if not value:
        return None
    try:
        return str(ipaddress.ip_address(value.strip()))
    except ValueError:
        return None


def client_address(environ: Mapping[str, str]) -> str | None:
    """Return the caller's IP address from a WSGI/CGI style environ.

    `REMOTE_ADDR` is returned as-is when no header carries a valid address.
    """
    for key in ADDRESS_KEYS[:-1]:
        address = _valid_ip(environ.get(key))
        if address is not None:
            return address
    return environ.get("REMOTE_ADDR") or None


def is_telegram_address(address: str | None) -> bool:
    """Check whether an address lies in one of Telegram's webhook networks."""
    ip = _valid_ip(address)
    if ip is None:
        return False
    parsed = ipaddress.ip_address(ip)
    return any(parsed in network for network in TELEGRAM_NETWORKS)


def limit_access_to_telegram_only(environ: Mapping[str, str]) -> None:
    """Stop the process unless the request came from Telegram.

    Raises:
        SystemExit: If no address is found or it is outside Telegram's networks.
    """
    address = client_address(environ)
    if address is None:
        sys.exit("Error. No ip detected!")
    if not is_telegram_address(address):
        sys.exit("Error. You have not Telegram valid IP.")
