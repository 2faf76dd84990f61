"""Render text as boxes drawn with line-drawing characters."""

from prettybox.core.exceptions import (
    InvalidContentError,
    MetadataSourceRequiredError,
    PrettyBoxError,
)
from prettybox.core.formatter import (
    PrettyBoxable,
    PrettyBoxFormatter,
    format_box,
    get_formatter,
    set_configuration,
)
from prettybox.core.renderer import ASCII_GLYPHS, DEFAULT_GLYPHS, BoxGlyphs, BoxRenderer
from prettybox.models.configuration import (
    DEFAULT_CONFIGURATION,
    BoxConfiguration,
    BoxConfigurationBuilder,
    MetadataKind,
    merge_layers,
    resolve,
)

__version__ = "0.1.0"

__all__ = [
    # Formatting
    "PrettyBoxFormatter",
    "PrettyBoxable",
    "format_box",
    "get_formatter",
    "set_configuration",
    # Configuration
    "BoxConfiguration",
    "BoxConfigurationBuilder",
    "DEFAULT_CONFIGURATION",
    "MetadataKind",
    "merge_layers",
    "resolve",
    # Rendering
    "ASCII_GLYPHS",
    "BoxGlyphs",
    "BoxRenderer",
    "DEFAULT_GLYPHS",
    # Errors
    "InvalidContentError",
    "MetadataSourceRequiredError",
    "PrettyBoxError",
]
