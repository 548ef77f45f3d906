"""Test fixtures for mqconfig."""

from collections.abc import Mapping
from dataclasses import dataclass, field

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def span_exporter():
    """Create an in-memory span exporter for testing."""
    return InMemorySpanExporter()


@pytest.fixture
def tracer_provider(span_exporter):
    """Create a tracer provider with in-memory exporter."""
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider


@dataclass
class StubMessage:
    topic: str
    payload: bytes = b""
    metadata: Mapping[str, str] = field(default_factory=dict)


class RecordingLogger:
    """Logger capability that keeps what it was given."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []

    def info(self, *args: object) -> None:
        self.records.append(("info", " ".join(map(str, args))))

    def warn(self, *args: object) -> None:
        self.records.append(("warn", " ".join(map(str, args))))

    def error(self, *args: object) -> None:
        self.records.append(("error", " ".join(map(str, args))))

    def errorf(self, format: str, *args: object) -> None:
        self.records.append(("error", format % args))

    def infof(self, format: str, *args: object) -> None:
        self.records.append(("info", format % args))


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def message() -> StubMessage:
    return StubMessage(topic="orders", payload=b"{}")
