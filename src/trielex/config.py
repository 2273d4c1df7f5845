"""ContextVar-based scan configuration for Trielex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Scanner snapshots the active config when it is created, so changing the
config later never affects a scan already in progress.

Usage:
    from trielex import Tokenizer
    from trielex.config import ScanConfig, scan_config_context

    tokenizer = Tokenizer(["->", "{", "}"])
    with scan_config_context(ScanConfig(strict=True)):
        for token in tokenizer.scan("{a -> b}"):
            ...  # UnrecognizedTokenError is raised instead of yielded

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        strict: Raise UnrecognizedTokenError from the scanner instead of
            yielding an UnrecognizedToken as the final item
        skip_whitespace: Discard whitespace runs (the default). When False,
            whitespace runs are yielded as TokenKind.WHITESPACE tokens

    """

    strict: bool = False
    skip_whitespace: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ScanConfig.from_dict({"strict": True, "other": 1}).strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to the default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(skip_whitespace=False)):
        ...     scanner = Tokenizer(["+"]).scan("a + b")
        >>> # Previous config restored; scanner keeps its snapshot

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
]
