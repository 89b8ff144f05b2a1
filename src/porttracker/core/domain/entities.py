"""
Domain Entities - Port bindings and port maps.

A PortBinding is a host-side address (IP and port) published by a workload.
A PortMap groups bindings under protocol keys such as "80/tcp", in the same
shape container runtimes report published ports.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from ..exceptions import ValidationError


HOST_SWITCH_IP = "192.168.127.2"

DEFAULT_PROTOCOL = "tcp"
SUPPORTED_PROTOCOLS = frozenset({"tcp", "udp", "sctp"})


@dataclass(frozen=True)
class PortBinding:
    """
    A host-side binding for one published port.

    The port is kept as a string, the way container runtimes report it.
    An empty host_ip means "all interfaces".
    """

    host_ip: str
    host_port: str

    def __post_init__(self) -> None:
        # Accept integer ports but always store the string form
        object.__setattr__(self, "host_port", str(self.host_port))

    @property
    def address(self) -> str:
        """Host-side "ip:port" address."""
        return f"{self.host_ip}:{self.host_port}"

    def remote_address(self, switch_ip: str = HOST_SWITCH_IP) -> str:
        """Switch-side "ip:port" address. Ports are never remapped."""
        return f"{switch_ip}:{self.host_port}"

    def __str__(self) -> str:
        return self.address

    def to_dict(self) -> dict[str, str]:
        """Convert to the runtime's JSON shape."""
        return {"HostIp": self.host_ip, "HostPort": self.host_port}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PortBinding:
        """
        Parse a binding from a runtime-style dict.

        Accepts "HostIp", "HostIP" or "host_ip" for the address and
        "HostPort" or "host_port" for the port.
        """
        host_ip = data.get("HostIp", data.get("HostIP", data.get("host_ip", "")))
        host_port = data.get("HostPort", data.get("host_port"))
        if host_port is None or str(host_port) == "":
            raise ValidationError(f"Binding has no host port: {dict(data)}")
        return cls(host_ip=host_ip or "", host_port=str(host_port))


PortMap = dict[str, list[PortBinding]]


def parse_protocol_key(key: str) -> tuple[str, str]:
    """
    Split a protocol key into (port, protocol).

    Args:
        key: Protocol key, e.g. "80/tcp" or "53/udp". A bare "80" means tcp.

    Returns:
        Tuple of port string and lowercase protocol

    Raises:
        ValidationError: If the port is not in 1-65535 or the protocol is unknown
    """
    port, _, proto = key.strip().partition("/")
    proto = proto.lower() or DEFAULT_PROTOCOL

    if not port.isdigit() or not 1 <= int(port) <= 65535:
        raise ValidationError(f"Invalid port in protocol key: {key!r}")
    if proto not in SUPPORTED_PROTOCOLS:
        raise ValidationError(f"Unsupported protocol in protocol key: {key!r}")

    return port, proto


def copy_port_map(port_map: Mapping[str, list[PortBinding]]) -> PortMap:
    """Return an independent copy; bindings are immutable so lists are enough."""
    return {key: list(bindings) for key, bindings in port_map.items()}


def iter_bindings(port_map: Mapping[str, list[PortBinding]]) -> Iterator[tuple[str, PortBinding]]:
    """Yield (protocol key, binding) pairs in insertion order."""
    for key, bindings in port_map.items():
        for binding in bindings:
            yield key, binding


def count_bindings(port_map: Mapping[str, list[PortBinding]]) -> int:
    return sum(len(bindings) for bindings in port_map.values())


def port_map_from_dict(data: Mapping[str, Any]) -> PortMap:
    """
    Build a PortMap from a runtime-style JSON port map.

    Keys are validated with parse_protocol_key. A null binding list
    (an exposed but unpublished port) yields no entry.
    """
    port_map: PortMap = {}
    for key, raw_bindings in data.items():
        parse_protocol_key(key)
        if not raw_bindings:
            continue
        port_map[key] = [PortBinding.from_dict(raw) for raw in raw_bindings]
    return port_map


def port_map_to_dict(port_map: Mapping[str, list[PortBinding]]) -> dict[str, list[dict[str, str]]]:
    return {key: [b.to_dict() for b in bindings] for key, bindings in port_map.items()}
