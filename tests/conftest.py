"""Global test fixtures."""

from collections.abc import Generator, Sequence
from datetime import datetime, timezone

import pytest

import prettybox.core.formatter as formatter_module
from prettybox.config import Settings
from prettybox.core.formatter import PrettyBoxFormatter
from prettybox.core.metadata import MetadataProvider
from prettybox.core.renderer import BoxRenderer

FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)


class Order:
    """Sample line-producing object."""

    def __init__(self, order_id: int, items: list[str]):
        self.order_id = order_id
        self.items = items

    def to_lines(self) -> Sequence[str]:
        return [f"Order #{self.order_id}", "", *self.items]


@pytest.fixture
def test_settings() -> Settings:
    """Create settings with a fixed line separator."""
    return Settings(line_separator="\n")


@pytest.fixture
def metadata_provider() -> MetadataProvider:
    """Create metadata provider with a fixed clock."""
    return MetadataProvider(clock=lambda: FIXED_NOW, time_format="%Y-%m-%d %H:%M:%S")


@pytest.fixture
def renderer() -> BoxRenderer:
    """Create renderer joining lines with newlines."""
    return BoxRenderer(line_separator="\n")


@pytest.fixture
def formatter(test_settings: Settings, metadata_provider: MetadataProvider) -> PrettyBoxFormatter:
    """Create formatter with default configuration."""
    return PrettyBoxFormatter(settings=test_settings, metadata=metadata_provider)


@pytest.fixture
def order() -> Order:
    """Create sample order."""
    return Order(42, ["2x coffee", "1x bagel"])


@pytest.fixture
def reset_default_formatter() -> Generator[None, None, None]:
    """Discard the shared default formatter around a test."""
    formatter_module._default_formatter = None
    yield
    formatter_module._default_formatter = None
