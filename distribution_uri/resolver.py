from __future__ import annotations

import os
from pathlib import Path
from urllib.parse import unquote, urlsplit

from contracts.errors import PathLike


def _scheme(raw: str) -> str:
    try:
        scheme = urlsplit(raw).scheme
    except ValueError:
        return ""
    # "C:/dists/tool.zip" parses with scheme "c"; that is a drive letter, not a URI.
    if len(scheme) < 2:
        return ""
    return scheme


def scheme_specific_part(uri: str) -> str:
    scheme = _scheme(uri)
    if not scheme:
        return uri
    return unquote(uri[len(scheme) + 1 :])


def resolve_distribution_uri(raw: str, anchor_dir: PathLike) -> str:
    """
    Turn a distribution location into an absolute URI.

    Values carrying a scheme are returned untouched. Anything else is a file
    path relative to ``anchor_dir`` (the directory holding the properties
    file, never the working directory) and comes back as a ``file:`` URI.
    The URI is percent-encoded; ``scheme_specific_part`` decodes it again.
    """
    if _scheme(raw):
        return raw
    anchor = Path(os.path.abspath(os.fspath(anchor_dir)))
    # A leading slash still means "under the anchor".
    return anchor.joinpath(raw.lstrip("/")).as_uri()
