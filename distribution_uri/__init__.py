from .resolver import resolve_distribution_uri, scheme_specific_part

__all__ = [
    "resolve_distribution_uri",
    "scheme_specific_part",
]
