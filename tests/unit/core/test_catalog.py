"""Tests for remote catalog queries."""

import pytest

from nodever.core.catalog import RemoteCatalog, Status, is_legacy
from nodever.core.errors import VersionNotFound
from nodever.core.semver import VersionId
from nodever.core.transport.fake import FakeTransport
from tests.test_utils.registry import INDEX_URL, index_page

MIRROR = "https://nodejs.org/dist"


def _catalog(*versions: str) -> RemoteCatalog:
    transport = FakeTransport(pages={INDEX_URL: index_page(*versions)})
    return RemoteCatalog(transport, MIRROR)


def test_fetch_returns_every_version_ascending() -> None:
    catalog = _catalog("10.0.0", "9.9.9", "0.6.1", "9.10.0", "9.9.9")

    assert [str(v) for v in catalog.fetch()] == ["0.6.1", "9.9.9", "9.10.0", "10.0.0"]


def test_listing_drops_legacy_releases() -> None:
    catalog = _catalog("0.0.6", "0.7.12", "0.8.5", "0.8.6", "0.10.48")

    assert [str(v) for v in catalog.listing()] == ["0.8.6", "0.10.48"]


def test_is_legacy_boundaries() -> None:
    assert is_legacy(VersionId(0, 7, 99))
    assert is_legacy(VersionId(0, 8, 5))
    assert not is_legacy(VersionId(0, 8, 6))
    assert not is_legacy(VersionId(1, 0, 0))


def test_latest_is_numeric_maximum() -> None:
    catalog = _catalog("9.9.9", "10.0.0", "9.10.0")

    assert catalog.latest() == VersionId(10, 0, 0)


def test_latest_stable_picks_highest_even_minor() -> None:
    catalog = _catalog("5.9.1", "5.10.0", "6.1.0", "6.2.0")

    assert catalog.latest_stable() == VersionId(6, 2, 0)


def test_latest_stable_skips_newer_odd_minor() -> None:
    catalog = _catalog("0.10.48", "0.11.16")

    assert catalog.latest_stable() == VersionId(0, 10, 48)
    assert catalog.latest() == VersionId(0, 11, 16)


def test_latest_on_empty_index_raises_not_found() -> None:
    catalog = _catalog()

    with pytest.raises(VersionNotFound):
        catalog.latest()


def test_latest_stable_ignores_legacy_even_lines() -> None:
    catalog = _catalog("0.6.21", "0.8.4", "0.9.1")

    with pytest.raises(VersionNotFound):
        catalog.latest_stable()


def test_list_with_status_annotates_each_entry() -> None:
    catalog = _catalog("16.0.0", "18.1.0", "20.0.0")

    entries = catalog.list_with_status(
        local_versions=[VersionId(16, 0, 0), VersionId(18, 1, 0)],
        active_version=VersionId(18, 1, 0),
    )

    assert entries == [
        (VersionId(16, 0, 0), Status.INSTALLED),
        (VersionId(18, 1, 0), Status.ACTIVE),
        (VersionId(20, 0, 0), Status.AVAILABLE),
    ]


def test_fetch_surfaces_transport_failure() -> None:
    catalog = RemoteCatalog(FakeTransport(), MIRROR)

    with pytest.raises(RuntimeError, match="404"):
        catalog.fetch()
