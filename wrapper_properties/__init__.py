from .loader import PROPERTIES_ENCODING, load_properties, parse_properties

__all__ = [
    "PROPERTIES_ENCODING",
    "load_properties",
    "parse_properties",
]
