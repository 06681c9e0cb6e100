from __future__ import annotations

import os
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


class ConfigurationError(RuntimeError):
    """Raised when wrapper properties cannot be turned into a Configuration."""

    def __init__(self, message: str, path: PathLike) -> None:
        super().__init__(message)
        self.path = os.fspath(path)


class MissingFileError(FileNotFoundError):
    def __init__(self, path: PathLike) -> None:
        self.path = os.fspath(path)
        super().__init__(f"Wrapper properties file '{self.path}' does not exist.")
