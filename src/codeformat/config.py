"""ContextVar-based highlight configuration for codeformat.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Formatters read the active config at format time unless one is passed
explicitly.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from codeformat import format_text
    from codeformat.config import HighlightConfig, highlight_config_context

    with highlight_config_context(HighlightConfig(css_class="code")):
        html = format_text(post_body)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from enum import Enum


class UnsupportedPolicy(Enum):
    """What the block driver emits for a region in an unsupported language."""

    EMPTY = "empty"  # region replaced by nothing
    PASSTHROUGH = "passthrough"  # region left exactly as written, markers included
    PLAIN = "plain"  # escaped body in the container <pre>


@dataclass(frozen=True, slots=True)
class HighlightConfig:
    """Immutable highlight configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        css_class: Class of the container element wrapping each block
        tab_width: Spaces substituted for each tab (0 keeps tabs)
        escape_html: Escape &, < and > in emitted text
        decode_markup: Treat block bodies as editor HTML and decode them
        embed_stylesheet: Prefix each formatted block with a <style> element
        max_nesting_depth: Deepest allowed embedded sub-formatting
        unsupported_policy: Output for blocks in an unknown language

    """

    css_class: str = "csharpcode"
    tab_width: int = 0
    escape_html: bool = True
    decode_markup: bool = True
    embed_stylesheet: bool = False
    max_nesting_depth: int = 4
    unsupported_policy: UnsupportedPolicy = UnsupportedPolicy.EMPTY

    @classmethod
    def from_dict(cls, config_dict: dict) -> "HighlightConfig":
        """Create HighlightConfig from dictionary.

        Only includes keys that are valid HighlightConfig fields; unknown keys
        are silently ignored. ``unsupported_policy`` may be given by value.

        Args:
            config_dict: Dictionary with config values. Keys should match
                HighlightConfig attribute names.

        Returns:
            New HighlightConfig instance with values from dict.

        Example:
            >>> config = HighlightConfig.from_dict({
            ...     "css_class": "code",
            ...     "unsupported_policy": "plain",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.unsupported_policy
            <UnsupportedPolicy.PLAIN: 'plain'>

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        policy = filtered.get("unsupported_policy")
        if isinstance(policy, str):
            filtered["unsupported_policy"] = UnsupportedPolicy(policy.lower())
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: HighlightConfig = HighlightConfig()

_highlight_config: ContextVar[HighlightConfig] = ContextVar(
    "highlight_config",
    default=_DEFAULT_CONFIG,
)


def get_highlight_config() -> HighlightConfig:
    """Get current highlight configuration (thread-local)."""
    return _highlight_config.get()


def set_highlight_config(config: HighlightConfig) -> None:
    """Set highlight configuration for current context.

    Args:
        config: HighlightConfig instance to use for this context.

    """
    _highlight_config.set(config)


def reset_highlight_config() -> None:
    """Reset to default configuration."""
    _highlight_config.set(_DEFAULT_CONFIG)


@contextmanager
def highlight_config_context(config: HighlightConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: HighlightConfig to use within the context.

    Yields:
        None

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _highlight_config.get()
    _highlight_config.set(config)
    try:
        yield
    finally:
        _highlight_config.set(previous)


__all__ = [
    "HighlightConfig",
    "UnsupportedPolicy",
    "get_highlight_config",
    "highlight_config_context",
    "reset_highlight_config",
    "set_highlight_config",
]
