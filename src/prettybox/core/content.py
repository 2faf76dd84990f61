"""Content preparation: metadata rows, reflow and box width selection."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from prettybox.core.layout import BoxLayout
from prettybox.core.metadata import MetadataProvider
from prettybox.models.configuration import BoxConfiguration


@dataclass
class PreparedContent:
    """Lines and widths for a single format call."""

    lines: list[str]
    content_width: int  # Width reserved for text
    line_width: int  # Border-to-border span: text plus horizontal padding


def add_metadata(
    lines: Sequence[str],
    config: BoxConfiguration,
    metadata: MetadataProvider,
    source: Any = None,
) -> list[str]:
    """Surround the content with header and footer metadata rows.

    Each metadata block is separated from the content by an empty line,
    which renders as a section break.
    """
    result = list(lines)
    if config.header_metadata:
        result = [*metadata.generate_all(config.header_metadata, source), "", *result]
    if config.footer_metadata:
        result = [*result, "", *metadata.generate_all(config.footer_metadata, source)]
    return result


def reflow(lines: Sequence[str], width: int) -> list[str]:
    """Split every line longer than ``width`` into chunks of ``width`` characters.

    Args:
        lines: Lines to reflow
        width: Maximum line length, must be positive

    Returns:
        New list of lines. Lines that already fit are kept as-is.
    """
    result: list[str] = []
    for line in lines:
        if len(line) <= width:
            result.append(line)
            continue
        result.extend(line[start : start + width] for start in range(0, len(line), width))
    return result


def prepare_content(
    lines: Sequence[str],
    config: BoxConfiguration,
    layout: BoxLayout,
    metadata: MetadataProvider,
    source: Any = None,
) -> PreparedContent:
    """Build the lines and widths for one box.

    Args:
        lines: Raw content lines
        config: Resolved, valid configuration
        layout: Widths derived from ``config``
        metadata: Producer for header/footer metadata strings
        source: Object being formatted, used by type and identity metadata

    Returns:
        PreparedContent for the renderer
    """
    prepared = add_metadata(lines, config, metadata, source)

    longest = max((len(line) for line in prepared), default=0)
    if longest > layout.max_content_width:
        prepared = reflow(prepared, layout.max_content_width)
        longest = layout.max_content_width

    if config.wrap_content:
        content_width = longest
        line_width = content_width + config.padding_left + config.padding_right
    else:
        content_width = layout.max_content_width
        line_width = layout.max_line_width

    return PreparedContent(lines=prepared, content_width=content_width, line_width=line_width)
