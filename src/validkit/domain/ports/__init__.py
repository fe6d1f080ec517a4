"""Domain ports (interfaces/protocols)."""

from validkit.domain.ports.reporter import ReporterProtocol
from validkit.domain.ports.type_registry import TypeRegistryPort

__all__ = [
    "TypeRegistryPort",
    "ReporterProtocol",
]
