"""
Tests for server version detection.
"""
import threading
from unittest.mock import Mock

import pytest

from asa_dialect.database.catalog_queries import CatalogQueryFactory, ServerVersionFamily
from asa_dialect.database.version_probe import VersionProbe, parse_major_version
from asa_dialect.errors import UnsupportedVersionError


def make_probe(version_string, override=None):
    executor = Mock()
    executor.execute.return_value = [{"ver": version_string}]
    probe = VersionProbe(
        executor,
        "SELECT @@version AS ver",
        CatalogQueryFactory.family_for_version,
        version_override=override,
    )
    return probe, executor


class TestParseMajorVersion:
    """Test extraction of the major version."""

    @pytest.mark.parametrize("version_string,major", [
        ("17.0.10.6057", 17),
        ("9.0.2.3951", 9),
        (" 12.0.1", 12),
        ("16", 16),
    ])
    def test_leading_number(self, version_string, major):
        assert parse_major_version(version_string) == major

    def test_not_a_version(self):
        with pytest.raises(UnsupportedVersionError):
            parse_major_version("unknown")

    def test_missing_version(self):
        with pytest.raises(UnsupportedVersionError):
            parse_major_version(None)


class TestVersionProbe:
    """Test family resolution and caching."""

    def test_resolves_family(self):
        probe, _ = make_probe("17.0.10.6057")
        assert probe.resolve() == ServerVersionFamily.V12_16_17
        assert probe.major_version == 17

    def test_queries_server_once(self):
        probe, executor = make_probe("11.0.1.2044")
        assert probe.resolve() == ServerVersionFamily.V11
        assert probe.resolve() == ServerVersionFamily.V11
        assert executor.execute.call_count == 1

    def test_unsupported_version(self):
        probe, _ = make_probe("10.0.1.3415")
        with pytest.raises(UnsupportedVersionError) as exc_info:
            probe.resolve()
        assert exc_info.value.version == 10
        assert probe.major_version is None

    def test_override_skips_query(self):
        probe, executor = make_probe("17.0.0", override=9)
        assert probe.resolve() == ServerVersionFamily.V9
        executor.execute.assert_not_called()

    def test_invalidate(self):
        probe, executor = make_probe("16.0.0.2546")
        probe.resolve()
        probe.invalidate()
        assert probe.major_version is None
        probe.resolve()
        assert executor.execute.call_count == 2

    def test_concurrent_resolve_queries_once(self):
        probe, executor = make_probe("12.0.1.3152")
        results = []

        def worker():
            results.append(probe.resolve())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == [ServerVersionFamily.V12_16_17] * 8
        assert executor.execute.call_count == 1
