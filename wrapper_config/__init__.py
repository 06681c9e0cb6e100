from .resolver import read_distribution_source, resolve_configuration

__all__ = [
    "read_distribution_source",
    "resolve_configuration",
]
