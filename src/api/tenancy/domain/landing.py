"""Landing domain rules: which hostnames are never tenant-scoped, and where
visitors of an unknown store are sent."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

LOCAL_DEV_HOST = "localhost"


def normalize_hostname(hostname: str) -> str:
    """Lower-case a hostname and drop any port or trailing dot."""
    host = hostname.strip().lower()
    if host.startswith("["):
        # IPv6 literal, keep the brackets
        return host.split("]", 1)[0] + "]"
    return host.split(":", 1)[0].rstrip(".")


def is_landing_hostname(hostname: str, landing_hostnames: Collection[str]) -> bool:
    """Case-insensitive membership test against the configured landing set."""
    return normalize_hostname(hostname) in landing_hostnames


def landing_url_for(
    hostname: str,
    *,
    root_domain: str,
    protocol: str = "https",
    port: int | None = None,
    local_dev_port: int = 3000,
) -> str:
    """Landing URL for a visitor currently on ``hostname``.

    * the root domain or one of its subdomains: the root domain, same protocol;
    * ``localhost`` or ``*.localhost``: the local alias on the same port;
    * anything else: the canonical production root domain.
    """
    host = normalize_hostname(hostname)
    scheme = protocol.rstrip(":") or "https"
    if host == root_domain or host.endswith(f".{root_domain}"):
        return f"{scheme}://{root_domain}"
    if host == LOCAL_DEV_HOST or host.endswith(f".{LOCAL_DEV_HOST}"):
        return f"{scheme}://{LOCAL_DEV_HOST}:{port or local_dev_port}"
    return f"https://{root_domain}"


@dataclass(frozen=True)
class StoreNotFoundFallback:
    """Terminal screen shown for an unknown store before leaving it."""

    landing_url: str
    seconds: int = 5

    @property
    def refresh_directive(self) -> str:
        """Value for an HTML ``refresh`` directive performing the redirect."""
        return f"{self.seconds};url={self.landing_url}"
