"""Width calculations for a resolved box configuration.

All functions expect a complete configuration, i.e. one merged over
``DEFAULT_CONFIGURATION``.
"""

from dataclasses import dataclass

from prettybox.models.configuration import BoxConfiguration


@dataclass(frozen=True)
class BoxLayout:
    """Widths derived from a configuration.

    ``max_content_width`` is the space available for text.
    ``max_line_width`` is the border-to-border span, i.e. text plus
    horizontal padding. Either may be zero or negative for an unusable
    configuration.
    """

    max_content_width: int
    max_line_width: int

    @property
    def is_valid(self) -> bool:
        return self.max_content_width > 0


def border_count(config: BoxConfiguration) -> int:
    """Number of enabled side borders (0, 1 or 2)."""
    return int(bool(config.border_left)) + int(bool(config.border_right))


def max_line_width(config: BoxConfiguration) -> int:
    return (
        config.chars_per_line
        - config.margin_left
        - config.margin_right
        - border_count(config)
    )


def max_content_width(config: BoxConfiguration) -> int:
    return max_line_width(config) - config.padding_left - config.padding_right


def is_valid(config: BoxConfiguration) -> bool:
    """Check that the configuration leaves room for at least one character of text."""
    return max_content_width(config) > 0


def compute_layout(config: BoxConfiguration) -> BoxLayout:
    return BoxLayout(
        max_content_width=max_content_width(config),
        max_line_width=max_line_width(config),
    )
