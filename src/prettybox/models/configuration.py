"""Box configuration models.

A ``BoxConfiguration`` is an immutable record in which every field is
optional. ``None`` means "unset": the field is inherited from the layer below
when configurations are merged. Layers are applied left to right, so with
``merge_layers(defaults, instance, call)`` a field set on the call layer always
wins over the same field on the instance layer, which wins over the defaults.

Example:
    config = (
        BoxConfiguration.builder()
        .set_chars_per_line(60)
        .set_borders(False)
        .set_horizontal_padding(2)
        .build()
    )
"""

from collections.abc import Iterable
from enum import Enum
from functools import reduce

from pydantic import BaseModel, ConfigDict, Field


class MetadataKind(str, Enum):
    """Kinds of metadata that can be shown above or below the content."""

    CURRENT_TIME = "current_time"
    TIMESTAMP_SECONDS = "timestamp_seconds"
    TIMESTAMP_MILLIS = "timestamp_millis"
    FULL_TYPE_NAME = "full_type_name"
    SHORT_TYPE_NAME = "short_type_name"
    IDENTITY_TOKEN = "identity_token"


class BoxConfiguration(BaseModel):
    """Partially specified box settings. ``None`` fields are unset."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Add a blank line before every box. Useful with loggers that prefix
    # each record with a tag, which would otherwise break the top border.
    prefix_with_newline: bool | None = None

    # Total width, including borders, horizontal padding and margins. With
    # wrap_content this is only the upper bound of the box width.
    chars_per_line: int | None = Field(default=None, ge=1)
    wrap_content: bool | None = None

    border_left: bool | None = None
    border_right: bool | None = None
    border_top: bool | None = None
    border_bottom: bool | None = None

    padding_left: int | None = Field(default=None, ge=0)
    padding_right: int | None = Field(default=None, ge=0)
    padding_top: int | None = Field(default=None, ge=0)
    padding_bottom: int | None = Field(default=None, ge=0)

    margin_left: int | None = Field(default=None, ge=0)
    margin_right: int | None = Field(default=None, ge=0)
    margin_top: int | None = Field(default=None, ge=0)
    margin_bottom: int | None = Field(default=None, ge=0)

    header_metadata: tuple[MetadataKind, ...] | None = None
    footer_metadata: tuple[MetadataKind, ...] | None = None

    @classmethod
    def builder(cls) -> "BoxConfigurationBuilder":
        """Create an empty builder."""
        return BoxConfigurationBuilder()

    def is_complete(self) -> bool:
        """Check whether every field is set."""
        return all(value is not None for _, value in self)


class BoxConfigurationBuilder:
    """Mutable draft of a ``BoxConfiguration``.

    Every setter returns the builder so calls can be chained. Passing ``None``
    to a setter unsets the field again.
    """

    def __init__(self) -> None:
        self._values: dict[str, object] = dict.fromkeys(BoxConfiguration.model_fields)

    @classmethod
    def from_configuration(cls, configuration: BoxConfiguration) -> "BoxConfigurationBuilder":
        """Create a builder holding every field of ``configuration``, unset ones included."""
        builder = cls()
        builder._values.update(dict(configuration))
        return builder

    def apply(self, configuration: BoxConfiguration) -> "BoxConfigurationBuilder":
        """Copy only the fields that ``configuration`` sets."""
        for name, value in configuration:
            if value is not None:
                self._values[name] = value
        return self

    def build(self) -> BoxConfiguration:
        """Freeze the draft into a ``BoxConfiguration``.

        Raises:
            pydantic.ValidationError: If a width or spacing value is out of range.
        """
        return BoxConfiguration(**self._values)

    # =========================================================================
    # Single-field setters
    # =========================================================================

    def set_prefix_with_newline(self, value: bool | None) -> "BoxConfigurationBuilder":
        self._values["prefix_with_newline"] = value
        return self

    def set_chars_per_line(self, value: int | None) -> "BoxConfigurationBuilder":
        self._values["chars_per_line"] = value
        return self

    def set_wrap_content(self, value: bool | None) -> "BoxConfigurationBuilder":
        self._values["wrap_content"] = value
        return self

    def set_border_left(self, value: bool | None) -> "BoxConfigurationBuilder":
        self._values["border_left"] = value
        return self

    def set_border_right(self, value: bool | None) -> "BoxConfigurationBuilder":
        """Close the right side of the box.

        Fonts that are not fully monospaced can make closed boxes look ragged,
        in which case leaving the right side open reads better.
        """
        self._values["border_right"] = value
        return self

    def set_border_top(self, value: bool | None) -> "BoxConfigurationBuilder":
        self._values["border_top"] = value
        return self

    def set_border_bottom(self, value: bool | None) -> "BoxConfigurationBuilder":
        self._values["border_bottom"] = value
        return self

    def set_padding_left(self, value: int | None) -> "BoxConfigurationBuilder":
        self._values["padding_left"] = value
        return self

    def set_padding_right(self, value: int | None) -> "BoxConfigurationBuilder":
        self._values["padding_right"] = value
        return self

    def set_padding_top(self, value: int | None) -> "BoxConfigurationBuilder":
        self._values["padding_top"] = value
        return self

    def set_padding_bottom(self, value: int | None) -> "BoxConfigurationBuilder":
        self._values["padding_bottom"] = value
        return self

    def set_margin_left(self, value: int | None) -> "BoxConfigurationBuilder":
        self._values["margin_left"] = value
        return self

    def set_margin_right(self, value: int | None) -> "BoxConfigurationBuilder":
        self._values["margin_right"] = value
        return self

    def set_margin_top(self, value: int | None) -> "BoxConfigurationBuilder":
        self._values["margin_top"] = value
        return self

    def set_margin_bottom(self, value: int | None) -> "BoxConfigurationBuilder":
        self._values["margin_bottom"] = value
        return self

    def set_header_metadata(
        self, kinds: Iterable[MetadataKind] | None
    ) -> "BoxConfigurationBuilder":
        self._values["header_metadata"] = None if kinds is None else tuple(kinds)
        return self

    def set_footer_metadata(
        self, kinds: Iterable[MetadataKind] | None
    ) -> "BoxConfigurationBuilder":
        self._values["footer_metadata"] = None if kinds is None else tuple(kinds)
        return self

    # =========================================================================
    # Convenience setters
    # =========================================================================

    def set_vertical_borders(self, value: bool | None) -> "BoxConfigurationBuilder":
        """Set the left and right borders."""
        self.set_border_left(value)
        self.set_border_right(value)
        return self

    def set_horizontal_borders(self, value: bool | None) -> "BoxConfigurationBuilder":
        """Set the top and bottom borders."""
        self.set_border_top(value)
        self.set_border_bottom(value)
        return self

    def set_borders(self, value: bool | None) -> "BoxConfigurationBuilder":
        self.set_vertical_borders(value)
        self.set_horizontal_borders(value)
        return self

    def set_horizontal_padding(self, value: int | None) -> "BoxConfigurationBuilder":
        """Set the spaces between the text and the left/right borders.

        Horizontal padding is part of ``chars_per_line``: a closed box 40
        characters wide with a horizontal padding of 10 leaves 18 characters
        for content.
        """
        self.set_padding_left(value)
        self.set_padding_right(value)
        return self

    def set_vertical_padding(self, value: int | None) -> "BoxConfigurationBuilder":
        """Set the blank rows between the text and the top/bottom borders."""
        self.set_padding_top(value)
        self.set_padding_bottom(value)
        return self

    def set_padding(self, value: int | None) -> "BoxConfigurationBuilder":
        self.set_vertical_padding(value)
        self.set_horizontal_padding(value)
        return self

    def set_horizontal_margin(self, value: int | None) -> "BoxConfigurationBuilder":
        """Set the spaces outside the left/right borders.

        Like padding, horizontal margins are counted inside ``chars_per_line``.
        """
        self.set_margin_left(value)
        self.set_margin_right(value)
        return self

    def set_vertical_margin(self, value: int | None) -> "BoxConfigurationBuilder":
        """Set the blank lines before and after the box."""
        self.set_margin_top(value)
        self.set_margin_bottom(value)
        return self

    def set_margin(self, value: int | None) -> "BoxConfigurationBuilder":
        self.set_vertical_margin(value)
        self.set_horizontal_margin(value)
        return self


# Compiled defaults. Every field is set, so any merge over them is complete.
DEFAULT_CONFIGURATION = BoxConfiguration(
    prefix_with_newline=False,
    chars_per_line=80,
    wrap_content=True,
    border_left=True,
    border_right=True,
    border_top=True,
    border_bottom=True,
    padding_left=1,
    padding_right=1,
    padding_top=0,
    padding_bottom=0,
    margin_left=0,
    margin_right=0,
    margin_top=0,
    margin_bottom=0,
    header_metadata=(),
    footer_metadata=(),
)


def resolve(base: BoxConfiguration, overlay: BoxConfiguration) -> BoxConfiguration:
    """Overlay the fields ``overlay`` sets onto ``base``.

    Args:
        base: Lower layer
        overlay: Upper layer; its unset fields keep the base value

    Returns:
        New configuration. Neither input is modified.
    """
    return BoxConfigurationBuilder.from_configuration(base).apply(overlay).build()


def merge_layers(*layers: BoxConfiguration) -> BoxConfiguration:
    """Merge configuration layers from lowest to highest precedence."""
    return reduce(resolve, layers, BoxConfiguration())
