"""
Domain layer - Port bindings, port maps and helpers.
"""

from .entities import (
    DEFAULT_PROTOCOL,
    HOST_SWITCH_IP,
    SUPPORTED_PROTOCOLS,
    PortBinding,
    PortMap,
    copy_port_map,
    count_bindings,
    iter_bindings,
    parse_protocol_key,
    port_map_from_dict,
    port_map_to_dict,
)


__all__ = [
    "DEFAULT_PROTOCOL",
    "HOST_SWITCH_IP",
    "SUPPORTED_PROTOCOLS",
    "PortBinding",
    "PortMap",
    "copy_port_map",
    "count_bindings",
    "iter_bindings",
    "parse_protocol_key",
    "port_map_from_dict",
    "port_map_to_dict",
]
