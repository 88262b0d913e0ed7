import io
import itertools

import pytest

from clipdir.models import (
    EntryNotFoundError,
    MalformedSelectionError,
    SizeLimitExceededError,
    StorageError,
)
from clipdir.services import HistoryConfig, HistoryService

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n" + b"\x00\x00\x00\rIHDR"


@pytest.fixture
def config(tmp_path):
    return HistoryConfig(
        storage_path=tmp_path / "history",
        byte_limit=4 * 1024 * 1024,
        dedupe_search_limit=1000,
        preview_length=100,
    )


@pytest.fixture
def service(config):
    ticks = itertools.count(1700000000000000)
    return HistoryService(config, clock=lambda: next(ticks))


def decoded(service, index):
    out = io.BytesIO()
    service.decode(index, out)
    return out.getvalue()


def test_store_then_decode_returns_exact_bytes(service):
    payload = b"  exact bytes\n\x00 kept \r\n"
    service.store(payload)

    assert decoded(service, 0) == payload


def test_store_creates_storage_directory(service, config):
    assert not config.storage_path.exists()

    result = service.store(b"hello")

    assert result.stored
    assert result.entry.name == "1700000000000000.txt"
    assert config.storage_path.is_dir()


@pytest.mark.parametrize("payload", [b"", b"   ", b"\n\t\r\n "])
def test_whitespace_only_store_is_a_noop(service, config, payload):
    service.store(b"existing")

    result = service.store(payload)

    assert not result.stored
    assert len(service.list_previews()) == 1


def test_oversized_store_fails_without_writing(service, config):
    service.store(b"existing")

    with pytest.raises(SizeLimitExceededError) as excinfo:
        service.store(b"x" * (config.byte_limit + 1))

    assert excinfo.value.limit == config.byte_limit
    assert len(service.list_previews()) == 1


def test_store_at_exact_limit_succeeds(tmp_path):
    config = HistoryConfig(storage_path=tmp_path, byte_limit=5)
    service = HistoryService(config)

    assert service.store(b"12345").stored


def test_storing_same_content_twice_keeps_newest_copy(service):
    first = service.store(b"hello").entry
    second = service.store(b"hello").entry

    assert service.list_previews() == ["0\thello"]
    assert decoded(service, 0) == b"hello"
    assert not first.path.exists()
    assert second.path.exists()


def test_listing_indices_follow_creation_order(service):
    for text in (b"one", b"two", b"three"):
        service.store(text)

    assert service.list_previews() == ["0\tthree", "1\ttwo", "2\tone"]


def test_delete_newest_shifts_indices(service):
    for text in (b"one", b"two", b"three"):
        service.store(text)

    assert service.delete_newest() is True

    assert service.list_previews() == ["0\ttwo", "1\tone"]


def test_delete_newest_on_empty_history(service, config):
    config.storage_path.mkdir()

    assert service.delete_newest() is False


def test_png_listing_shows_binary_placeholder(service):
    payload = PNG_SIGNATURE + b"\x00" * (2097152 - len(PNG_SIGNATURE))

    entry = service.store(payload).entry

    assert entry.type_tag == "png"
    assert service.list_previews() == ["0\t[[ binary data 2.00 MiB png ]]"]


def test_decode_out_of_range_writes_nothing(service):
    service.store(b"only")
    out = io.BytesIO()

    with pytest.raises(EntryNotFoundError):
        service.decode(1, out)

    assert out.getvalue() == b""


def test_decode_selection_uses_leading_id(service):
    service.store(b"older")
    service.store(b"newer")
    out = io.BytesIO()

    service.decode_selection(b"1\tolder\n", out)

    assert out.getvalue() == b"older"


def test_decode_selection_without_id(service):
    service.store(b"text")

    with pytest.raises(MalformedSelectionError):
        service.decode_selection("no id here", io.BytesIO())


def test_duplicate_store_with_stray_file_keeps_newest_copy(service, config):
    config.storage_path.mkdir()
    (config.storage_path / "README").write_bytes(b"not an entry")

    service.store(b"hello")
    newest = service.store(b"hello").entry

    copies = [p for p in config.storage_path.iterdir() if p.read_bytes() == b"hello"]
    assert copies == [newest.path]


def test_clock_stepping_back_keeps_written_entry(config):
    ticks = iter([1700000000000005, 1700000000000001])
    service = HistoryService(config, clock=lambda: next(ticks))

    service.store(b"hello")
    written = service.store(b"hello").entry

    assert written.name == "1700000000000001.txt"
    assert written.path.exists()
    assert [p.name for p in config.storage_path.iterdir()] == [written.name]


def test_listing_failure_during_dedup_keeps_new_entry(service, config, monkeypatch):
    service.store(b"older")

    def broken_list():
        raise StorageError("Failed to read clipboard directory")

    monkeypatch.setattr(service.entry_store, "list", broken_list)

    with pytest.raises(StorageError):
        service.store(b"newer")

    assert sorted(p.read_bytes() for p in config.storage_path.iterdir()) == [
        b"newer", b"older"]
