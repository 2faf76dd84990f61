"""Tests for layout width calculations."""

import pytest

from prettybox.core.layout import (
    BoxLayout,
    border_count,
    compute_layout,
    is_valid,
    max_content_width,
    max_line_width,
)
from prettybox.models.configuration import (
    DEFAULT_CONFIGURATION,
    BoxConfiguration,
    resolve,
)


def _resolved(**fields: object) -> BoxConfiguration:
    return resolve(DEFAULT_CONFIGURATION, BoxConfiguration(**fields))


class TestLayout:
    """Tests for width calculations."""

    def test_default_widths(self) -> None:
        """Test widths for the compiled defaults."""
        assert max_content_width(DEFAULT_CONFIGURATION) == 76
        assert max_line_width(DEFAULT_CONFIGURATION) == 78

    @pytest.mark.parametrize(
        ("left", "right", "expected"),
        [(True, True, 2), (True, False, 1), (False, True, 1), (False, False, 0)],
    )
    def test_border_count(self, left: bool, right: bool, expected: int) -> None:
        """Test counting side borders."""
        config = _resolved(border_left=left, border_right=right)

        assert border_count(config) == expected

    def test_top_and_bottom_borders_not_counted(self) -> None:
        """Test that horizontal borders do not affect widths."""
        config = _resolved(border_top=False, border_bottom=False)

        assert max_content_width(config) == 76

    def test_margins_and_padding(self) -> None:
        """Test that margins and padding are counted inside chars_per_line."""
        config = _resolved(
            chars_per_line=40,
            padding_left=3,
            padding_right=2,
            margin_left=4,
            margin_right=1,
        )

        assert max_line_width(config) == 40 - 4 - 1 - 2
        assert max_content_width(config) == 40 - 3 - 2 - 4 - 1 - 2

    def test_line_width_excludes_padding_only(self) -> None:
        """Test line width is content width plus horizontal padding."""
        config = _resolved(chars_per_line=30, padding_left=5, padding_right=4)

        assert max_line_width(config) - max_content_width(config) == 9

    def test_invalid_when_no_room_for_content(self) -> None:
        """Test that a box with negative content width is invalid."""
        config = _resolved(chars_per_line=2, padding_left=1, padding_right=1)

        assert max_content_width(config) == -2
        assert is_valid(config) is False

    def test_zero_content_width_invalid(self) -> None:
        """Test the validity boundary."""
        assert is_valid(_resolved(chars_per_line=4)) is False
        assert is_valid(_resolved(chars_per_line=5)) is True

    def test_compute_layout(self) -> None:
        """Test layout bundles both widths."""
        layout = compute_layout(DEFAULT_CONFIGURATION)

        assert layout == BoxLayout(max_content_width=76, max_line_width=78)
        assert layout.is_valid is True

    def test_invalid_layout(self) -> None:
        """Test layout validity flag."""
        assert BoxLayout(max_content_width=0, max_line_width=2).is_valid is False
