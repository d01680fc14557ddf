"""Host and protocol of an inbound navigation."""

from __future__ import annotations

from dataclasses import dataclass

from tenancy.domain.landing import normalize_hostname

DEFAULT_HOST = "localhost"


@dataclass(frozen=True)
class RequestHost:
    """Where the visitor believes they are.

    ``host_header`` keeps the port and builds absolute URLs; ``hostname``
    drops it and is what tenants are resolved from.
    """

    hostname: str
    host_header: str
    protocol: str

    @classmethod
    def from_headers(
        cls,
        host: str | None,
        forwarded_host: str | None = None,
        forwarded_proto: str | None = None,
        scheme: str = "http",
    ) -> RequestHost:
        """Build from request headers, preferring the proxy's forwarded values.

        Only the first entry of a comma-separated forwarded header counts.
        """
        raw_host = _first(forwarded_host) or _first(host) or DEFAULT_HOST
        protocol = _first(forwarded_proto) or scheme or "http"
        return cls(
            hostname=normalize_hostname(raw_host),
            host_header=raw_host,
            protocol=protocol.lower(),
        )

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{self.host_header}"

    @property
    def port(self) -> int | None:
        _, sep, port = self.host_header.rpartition(":")
        if not sep or not port.isdigit():
            return None
        return int(port)


def _first(value: str | None) -> str:
    if not value:
        return ""
    return value.split(",", 1)[0].strip()
