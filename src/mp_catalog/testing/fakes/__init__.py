"""Testing fakes – in-memory implementations of catalogue ports."""
from mp_catalog.testing.fakes.clock import FAKE_NOW, FakeClock
from mp_catalog.testing.fakes.export import RecordingExporter
from mp_catalog.testing.fakes.products import InMemoryProductReadRepository, StoredProduct

__all__ = ["FAKE_NOW", "FakeClock", "InMemoryProductReadRepository", "RecordingExporter", "StoredProduct"]
