"""Box rendering.

Turns prepared content into the final multi-line string:

    ┌────────────┐
    │ first line │
    ├┄┄┄┄┄┄┄┄┄┄┄┄┤
    │ second     │
    └────────────┘

An empty content line is drawn as a section break (the dashed row above).
"""

from collections.abc import Sequence
from dataclasses import dataclass

from prettybox.config import settings
from prettybox.core.content import PreparedContent
from prettybox.models.configuration import BoxConfiguration


@dataclass(frozen=True)
class BoxGlyphs:
    """Characters used to draw a box, one per role."""

    top_left: str = "┌"
    top_right: str = "┐"
    bottom_left: str = "└"
    bottom_right: str = "┘"
    middle_left: str = "├"
    middle_right: str = "┤"
    vertical: str = "│"
    rule: str = "─"
    section_break: str = "┄"


DEFAULT_GLYPHS = BoxGlyphs()

# For terminals and log viewers without box-drawing fonts
ASCII_GLYPHS = BoxGlyphs(
    top_left="+",
    top_right="+",
    bottom_left="+",
    bottom_right="+",
    middle_left="+",
    middle_right="+",
    vertical="|",
    rule="-",
    section_break=".",
)


class BoxRenderer:
    """Draws prepared content as a box.

    The renderer trusts its inputs: widths come from ``prepare_content`` and
    the configuration has already been validated.
    """

    def __init__(
        self,
        glyphs: BoxGlyphs = DEFAULT_GLYPHS,
        line_separator: str | None = None,
    ):
        self.glyphs = glyphs
        self.line_separator = line_separator or settings.line_separator

    def render(
        self,
        content: PreparedContent,
        config: BoxConfiguration,
        warnings: Sequence[str] = (),
    ) -> str:
        """Render a box.

        Args:
            content: Prepared lines and widths
            config: Resolved configuration
            warnings: Lines emitted before the box itself

        Returns:
            Box lines joined with the line separator, without a trailing separator.
        """
        return self.line_separator.join(self.render_lines(content, config, warnings))

    def render_lines(
        self,
        content: PreparedContent,
        config: BoxConfiguration,
        warnings: Sequence[str] = (),
    ) -> list[str]:
        g = self.glyphs
        width = content.line_width
        lines: list[str] = list(warnings)

        if config.prefix_with_newline:
            lines.append("")
        lines.extend([""] * config.margin_top)

        if config.border_top:
            lines.append(self._border(config, g.top_left, g.rule * width, g.top_right))

        padding_row = self._border(config, g.vertical, " " * width, g.vertical)
        lines.extend([padding_row] * config.padding_top)

        for line in content.lines:
            if not line:
                lines.append(
                    self._border(config, g.middle_left, g.section_break * width, g.middle_right)
                )
            else:
                lines.append(self._content_row(line, content.content_width, config))

        lines.extend([padding_row] * config.padding_bottom)

        if config.border_bottom:
            lines.append(self._border(config, g.bottom_left, g.rule * width, g.bottom_right))

        lines.extend([""] * config.margin_bottom)
        return lines

    # =========================================================================
    # Private Helper Methods
    # =========================================================================

    def _border(self, config: BoxConfiguration, left: str, fill: str, right: str) -> str:
        """Build a full-width row, drawing the side glyphs only where borders are enabled."""
        return "".join(
            [
                " " * config.margin_left,
                left if config.border_left else "",
                fill,
                right if config.border_right else "",
                " " * config.margin_right,
            ]
        )

    def _content_row(self, text: str, content_width: int, config: BoxConfiguration) -> str:
        right_fill = config.padding_right + content_width - len(text)
        return self._border(
            config,
            self.glyphs.vertical,
            f"{' ' * config.padding_left}{text}{' ' * right_fill}",
            self.glyphs.vertical,
        )
