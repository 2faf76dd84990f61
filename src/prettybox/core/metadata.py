"""Metadata strings shown in box headers and footers."""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from prettybox.config import settings
from prettybox.core.exceptions import MetadataSourceRequiredError
from prettybox.models.configuration import MetadataKind

# Kinds that describe the formatted object rather than the moment of formatting
SOURCE_KINDS = frozenset(
    {
        MetadataKind.FULL_TYPE_NAME,
        MetadataKind.SHORT_TYPE_NAME,
        MetadataKind.IDENTITY_TOKEN,
    }
)


def _local_now() -> datetime:
    return datetime.now().astimezone()


class MetadataProvider:
    """Produces one metadata string per ``MetadataKind``.

    Example:
        provider = MetadataProvider()
        provider.generate(MetadataKind.SHORT_TYPE_NAME, source=order)
        # 'Order'
    """

    def __init__(
        self,
        clock: Callable[[], datetime] | None = None,
        time_format: str | None = None,
    ):
        """Initialize the provider.

        Args:
            clock: Returns the current time. Defaults to local wall-clock time.
            time_format: strftime format for CURRENT_TIME. Defaults to settings.
        """
        self.clock = clock or _local_now
        self.time_format = time_format or settings.time_format
        self._producers: dict[MetadataKind, Callable[[Any], str]] = {
            MetadataKind.CURRENT_TIME: self._current_time,
            MetadataKind.TIMESTAMP_SECONDS: self._timestamp_seconds,
            MetadataKind.TIMESTAMP_MILLIS: self._timestamp_millis,
            MetadataKind.FULL_TYPE_NAME: self._full_type_name,
            MetadataKind.SHORT_TYPE_NAME: self._short_type_name,
            MetadataKind.IDENTITY_TOKEN: self._identity_token,
        }

    def generate(self, kind: MetadataKind, source: Any = None) -> str:
        """Generate the metadata string for ``kind``.

        Args:
            kind: Metadata kind to produce
            source: Object being formatted. Required for type and identity kinds.

        Returns:
            Metadata string

        Raises:
            MetadataSourceRequiredError: If ``kind`` needs a source and none was given.
        """
        if kind in SOURCE_KINDS and source is None:
            raise MetadataSourceRequiredError(MetadataKind(kind).value)
        return self._producers[kind](source)

    def generate_all(self, kinds: tuple[MetadataKind, ...], source: Any = None) -> list[str]:
        return [self.generate(kind, source) for kind in kinds]

    # =========================================================================
    # Producers
    # =========================================================================

    def _current_time(self, source: Any) -> str:
        return self.clock().strftime(self.time_format)

    def _timestamp_seconds(self, source: Any) -> str:
        return str(int(self.clock().timestamp()))

    def _timestamp_millis(self, source: Any) -> str:
        now = self.clock()
        return str(int(now.timestamp()) * 1000 + now.microsecond // 1000)

    def _full_type_name(self, source: Any) -> str:
        cls = type(source)
        if cls.__module__ == "builtins":
            return cls.__qualname__
        return f"{cls.__module__}.{cls.__qualname__}"

    def _short_type_name(self, source: Any) -> str:
        return type(source).__name__

    def _identity_token(self, source: Any) -> str:
        return f"{type(source).__name__}@{id(source):x}"
