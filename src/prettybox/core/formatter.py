"""Box formatter: configuration layering, fallback and rendering."""

import logging
import threading
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from prettybox.config import Settings, settings as default_settings
from prettybox.core.content import prepare_content
from prettybox.core.exceptions import InvalidContentError
from prettybox.core.layout import BoxLayout, compute_layout
from prettybox.core.metadata import MetadataProvider
from prettybox.core.renderer import BoxRenderer
from prettybox.models.configuration import (
    DEFAULT_CONFIGURATION,
    BoxConfiguration,
    resolve,
)

logger = logging.getLogger(__name__)

INSTANCE_FALLBACK_WARNING = "WARNING: invalid instance configuration, using defaults"
CALL_FALLBACK_WARNING = "WARNING: invalid call configuration, using instance configuration"


@runtime_checkable
class PrettyBoxable(Protocol):
    """An object that knows how to describe itself as lines of text."""

    def to_lines(self) -> Sequence[str]: ...


@dataclass(frozen=True)
class _InstanceState:
    """Resolved instance configuration and the widths derived from it."""

    configuration: BoxConfiguration
    layout: BoxLayout
    fallback: bool = False


class PrettyBoxFormatter:
    """Formats lines of text as a box.

    Configuration is layered: compiled defaults, then the instance
    configuration, then an optional per-call configuration. An unusable
    instance configuration falls back to the defaults and an unusable
    per-call configuration falls back to the instance configuration; in
    both cases the output starts with a warning line.

    Example:
        formatter = PrettyBoxFormatter()
        print(formatter.format(["hello", "", "world"]))
    """

    def __init__(
        self,
        configuration: BoxConfiguration | None = None,
        *,
        renderer: BoxRenderer | None = None,
        metadata: MetadataProvider | None = None,
        settings: Settings | None = None,
    ):
        """Initialize the formatter.

        Args:
            configuration: Instance configuration, merged over the defaults.
            renderer: Box renderer. Uses default glyphs if not provided.
            metadata: Metadata provider. Uses the wall clock if not provided.
            settings: Ambient settings. Uses the global settings if not provided.
        """
        self.settings = settings or default_settings
        self.renderer = renderer or BoxRenderer(line_separator=self.settings.line_separator)
        self.metadata = metadata or MetadataProvider(time_format=self.settings.time_format)
        self._lock = threading.Lock()
        self._state = self._resolve_instance(configuration or BoxConfiguration())

    # =========================================================================
    # Configuration
    # =========================================================================

    def set_configuration(self, configuration: BoxConfiguration) -> None:
        """Replace the instance configuration.

        The configuration is merged over the compiled defaults. If the result
        leaves no room for content, the defaults are used until a valid
        configuration is set.
        """
        state = self._resolve_instance(configuration)
        with self._lock:
            self._state = state
        logger.debug(f"Instance configuration set (fallback={state.fallback})")

    def get_configuration(self) -> BoxConfiguration:
        """Get the resolved instance configuration currently in effect."""
        with self._lock:
            return self._state.configuration

    @property
    def layout(self) -> BoxLayout:
        """Widths derived from the instance configuration."""
        with self._lock:
            return self._state.layout

    @property
    def is_fallback(self) -> bool:
        """Whether the last instance configuration was rejected."""
        with self._lock:
            return self._state.fallback

    # =========================================================================
    # Formatting
    # =========================================================================

    def format(
        self,
        content: Sequence[str] | PrettyBoxable,
        configuration: BoxConfiguration | None = None,
        *,
        source: Any = None,
    ) -> str:
        """Format content as a box.

        Args:
            content: Lines of text, or an object with a ``to_lines()`` method.
            configuration: Per-call overrides, merged over the instance configuration.
            source: Object described by type and identity metadata. Defaults to
                ``content`` when it is a ``PrettyBoxable``.

        Returns:
            The box as a single string.

        Raises:
            InvalidContentError: If ``content`` is not a sequence of strings
                or a ``PrettyBoxable``.
            MetadataSourceRequiredError: If the configuration asks for type or
                identity metadata and there is no source object.
        """
        if isinstance(content, PrettyBoxable):
            if source is None:
                source = content
            lines = self._validate_lines(content.to_lines())
        else:
            lines = self._validate_lines(content)

        with self._lock:
            state = self._state

        warnings: list[str] = []
        if state.fallback:
            warnings.append(INSTANCE_FALLBACK_WARNING)

        resolved, layout = state.configuration, state.layout
        if configuration is not None:
            call_config = resolve(state.configuration, configuration)
            call_layout = compute_layout(call_config)
            if call_layout.is_valid:
                resolved, layout = call_config, call_layout
            else:
                logger.warning(
                    f"Call configuration leaves {call_layout.max_content_width} "
                    "characters for content, using instance configuration"
                )
                warnings.append(CALL_FALLBACK_WARNING)

        prepared = prepare_content(lines, resolved, layout, self.metadata, source)
        return self.renderer.render(prepared, resolved, warnings)

    # =========================================================================
    # Private Helper Methods
    # =========================================================================

    def _resolve_instance(self, configuration: BoxConfiguration) -> _InstanceState:
        resolved = resolve(DEFAULT_CONFIGURATION, configuration)
        layout = compute_layout(resolved)
        if layout.is_valid:
            return _InstanceState(configuration=resolved, layout=layout)

        logger.warning(
            f"Instance configuration leaves {layout.max_content_width} "
            "characters for content, falling back to defaults"
        )
        return _InstanceState(
            configuration=DEFAULT_CONFIGURATION,
            layout=compute_layout(DEFAULT_CONFIGURATION),
            fallback=True,
        )

    def _validate_lines(self, lines: Any) -> list[str]:
        if isinstance(lines, (str, bytes)) or not isinstance(lines, Sequence):
            raise InvalidContentError(type(lines).__name__)
        for line in lines:
            if not isinstance(line, str):
                raise InvalidContentError(type(line).__name__)
        return list(lines)


# =============================================================================
# Module-level convenience instance
# =============================================================================

# Default formatter instance for simple usage
_default_formatter: PrettyBoxFormatter | None = None
_default_lock = threading.Lock()


def get_formatter(configuration: BoxConfiguration | None = None) -> PrettyBoxFormatter:
    """Get a PrettyBoxFormatter instance.

    Args:
        configuration: Optional configuration. If None, returns the shared default.

    Returns:
        PrettyBoxFormatter instance
    """
    global _default_formatter
    if configuration is not None:
        return PrettyBoxFormatter(configuration)
    with _default_lock:
        if _default_formatter is None:
            _default_formatter = PrettyBoxFormatter()
        return _default_formatter


def set_configuration(configuration: BoxConfiguration) -> None:
    """Replace the instance configuration of the shared default formatter."""
    get_formatter().set_configuration(configuration)


def format_box(
    content: Sequence[str] | PrettyBoxable,
    configuration: BoxConfiguration | None = None,
    *,
    source: Any = None,
) -> str:
    """Convenience function to format content with the shared default formatter.

    Args:
        content: Lines of text, or an object with a ``to_lines()`` method
        configuration: Per-call overrides
        source: Object described by type and identity metadata

    Returns:
        Formatted box string
    """
    return get_formatter().format(content, configuration, source=source)
