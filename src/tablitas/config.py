"""ContextVar-based generator configuration for Tablitas.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is read by the emitter (symbol prefixes) and the driver (worker
count for parallel category scans).

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed. Parallel category scans run in copies of the
    submitting context, so they see the caller's config.

Usage:
    from tablitas.config import GeneratorConfig, generator_config_context

    with generator_config_context(GeneratorConfig(range_prefix="pm_unicode")):
        text = generate("utf-8")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Immutable generator configuration.

    Attributes:
        byte_table_prefix: Symbol prefix for byte tables
            (``{prefix}_{label}_table``)
        range_prefix: Symbol prefix for range arrays
            (``{prefix}_{category}_codepoints``)
        workers: Threads for category scans; None or 1 scans sequentially

    """

    byte_table_prefix: str = "encoding"
    range_prefix: str = "unicode"
    workers: int | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "GeneratorConfig":
        """Create GeneratorConfig from dictionary.

        Only includes keys that are valid GeneratorConfig fields; unknown
        keys are silently ignored.

        Example:
            >>> config = GeneratorConfig.from_dict({"workers": 3, "unknown_key": 1})
            >>> config.workers
            3

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: GeneratorConfig = GeneratorConfig()

_generator_config: ContextVar[GeneratorConfig] = ContextVar(
    "generator_config",
    default=_DEFAULT_CONFIG,
)


def get_generator_config() -> GeneratorConfig:
    """Get current generator configuration (thread-local)."""
    return _generator_config.get()


def set_generator_config(config: GeneratorConfig) -> None:
    """Set generator configuration for current context."""
    _generator_config.set(config)


def reset_generator_config() -> None:
    """Reset to the module-level default configuration."""
    _generator_config.set(_DEFAULT_CONFIG)


@contextmanager
def generator_config_context(config: GeneratorConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.
    """
    previous = _generator_config.get()
    _generator_config.set(config)
    try:
        yield
    finally:
        _generator_config.set(previous)


__all__ = [
    "GeneratorConfig",
    "generator_config_context",
    "get_generator_config",
    "reset_generator_config",
    "set_generator_config",
]
