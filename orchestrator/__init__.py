from .executor import WrapperExecutor

__all__ = [
    "WrapperExecutor",
]
