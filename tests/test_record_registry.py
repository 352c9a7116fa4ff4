"""Tests for the record registry service."""

import threading

import pytest

from common.constants import MAX_IDENTIFIER_BYTES, U256_MAX, ZERO_ADDRESS
from common.types import FileRecord
from registry.events import FileRegisteredEvent
from registry.exceptions import (
    AlreadyRegisteredError,
    InvalidInputError,
    OutOfRangeError,
    PausedError,
)
from registry.repositories.event_repository import EventRepository
from registry.services.deployment import deploy_registry
from tests.conftest import FIXED_TIME, OPERATOR, OPERATOR_HEX, STRANGER, UPLOADER


def test_register_and_lookup(registry, context):
    """Register one file and read it back every way the registry allows."""
    assert registry.register("bafy123", "report.pdf", 2048, context(height=100)) is True

    record = registry.get_by_identifier("bafy123")
    assert record == FileRecord(
        identifier="bafy123",
        name="report.pdf",
        size=2048,
        uploader=UPLOADER,
        block_height=100,
        timestamp=FIXED_TIME,
        exists=True,
    )
    assert registry.exists_only("bafy123") is True
    assert registry.total_count() == 1
    assert registry.get_by_ordinal(0) == record


def test_duplicate_registration_rejected(registry, context):
    registry.register("bafy123", "report.pdf", 2048, context(height=100))

    with pytest.raises(AlreadyRegisteredError):
        registry.register("bafy123", "other.pdf", 10, context(height=101, caller=STRANGER))

    record = registry.get_by_identifier("bafy123")
    assert record.name == "report.pdf"
    assert record.uploader == UPLOADER
    assert registry.total_count() == 1


def test_ordinals_follow_registration_order(registry, context):
    identifiers = [f"bafy{i}" for i in range(5)]
    for height, identifier in enumerate(identifiers, start=1):
        registry.register(identifier, f"{identifier}.bin", height * 10, context(height=height))

    assert registry.total_count() == 5
    for index, identifier in enumerate(identifiers):
        assert registry.get_by_ordinal(index).identifier == identifier


def test_ordinals_are_stable_after_further_registrations(registry, context):
    registry.register("first", "a.txt", 1, context())
    before = registry.get_by_ordinal(0)

    registry.register("second", "b.txt", 2, context())
    registry.register("third", "c.txt", 3, context())

    assert registry.get_by_ordinal(0) == before


def test_miss_returns_zeroed_record(registry):
    record = registry.get_by_identifier("bafy-missing")

    assert record == FileRecord.missing()
    assert record.identifier == ""
    assert record.uploader == ZERO_ADDRESS
    assert registry.exists_only("bafy-missing") is False


def test_empty_identifier_lookup_is_a_miss(registry):
    assert registry.get_by_identifier("").exists is False
    assert registry.exists_only("") is False


def test_get_by_ordinal_out_of_range(registry, context):
    with pytest.raises(OutOfRangeError):
        registry.get_by_ordinal(0)

    registry.register("bafy123", "report.pdf", 2048, context())
    with pytest.raises(OutOfRangeError):
        registry.get_by_ordinal(1)


def test_get_by_ordinal_negative(registry):
    with pytest.raises(InvalidInputError):
        registry.get_by_ordinal(-1)


@pytest.mark.parametrize("identifier,name,size", [
    ("", "report.pdf", 1),
    ("bafy123", "", 1),
    ("bafy123", "report.pdf", 0),
    ("bafy123", "report.pdf", -5),
    ("bafy123", "report.pdf", U256_MAX + 1),
    ("bafy123", "report.pdf", True),
    ("bafy123", "report.pdf", "12"),
])
def test_invalid_registration_rejected(registry, context, identifier, name, size):
    with pytest.raises(InvalidInputError):
        registry.register(identifier, name, size, context())

    assert registry.total_count() == 0
    assert EventRepository.list_events() == []


def test_caller_must_be_full_width(registry, context):
    with pytest.raises(InvalidInputError):
        registry.register("bafy123", "report.pdf", 1, context(caller=b"\x01" * 20))


def test_largest_size_accepted(registry, context):
    registry.register("bafy-huge", "huge.bin", U256_MAX, context())
    assert registry.get_by_identifier("bafy-huge").size == U256_MAX


def test_identifier_at_byte_limit_accepted(registry, context):
    identifier = "c" * MAX_IDENTIFIER_BYTES
    registry.register(identifier, "max.bin", 1, context())

    assert registry.get_by_ordinal(0).identifier == identifier
    assert registry.get_by_identifier(identifier).exists is True


def test_identifier_over_byte_limit_rejected(registry, context):
    with pytest.raises(InvalidInputError):
        registry.register("c" * (MAX_IDENTIFIER_BYTES + 1), "big.bin", 1, context())


def test_identifier_limit_counts_utf8_bytes(registry, context):
    identifier = "é" * (MAX_IDENTIFIER_BYTES // 2 + 1)
    with pytest.raises(InvalidInputError):
        registry.register(identifier, "accents.bin", 1, context())


def test_long_identifiers_do_not_overlap(registry, context):
    first = "a" * MAX_IDENTIFIER_BYTES
    second = "b" * MAX_IDENTIFIER_BYTES
    registry.register(first, "one", 1, context())
    registry.register(second, "two", 2, context())

    assert registry.get_by_ordinal(0).identifier == first
    assert registry.get_by_ordinal(1).identifier == second


def test_unicode_name_round_trips(registry, context):
    registry.register("bafy-uni", "résumé 日本 🌍.pdf", 99, context())
    assert registry.get_by_identifier("bafy-uni").name == "résumé 日本 🌍.pdf"


def test_paused_registry_rejects_registration(registry, context):
    registry.gate.set_paused(OPERATOR, True)

    with pytest.raises(PausedError):
        registry.register("bafy123", "report.pdf", 2048, context())

    assert registry.total_count() == 0
    assert registry.exists_only("bafy123") is False


def test_pause_check_precedes_validation(registry, context):
    registry.gate.set_paused(OPERATOR, True)
    with pytest.raises(PausedError):
        registry.register("", "", 0, context())


def test_reads_allowed_while_paused(registry, context):
    registry.register("bafy123", "report.pdf", 2048, context())
    registry.gate.set_paused(OPERATOR, True)

    assert registry.exists_only("bafy123") is True
    assert registry.total_count() == 1
    assert registry.get_by_ordinal(0).name == "report.pdf"


def test_unpause_reopens_registration(registry, context):
    registry.gate.set_paused(OPERATOR, True)
    registry.gate.set_paused(OPERATOR, False)

    assert registry.register("bafy123", "report.pdf", 2048, context()) is True


def test_registration_appends_event(registry, context):
    registry.register("bafy123", "report.pdf", 2048, context(height=100))

    events = EventRepository.list_events()
    assert len(events) == 1
    assert events[0].event_type == "FileRegistered"
    assert events[0].block_height == 100
    assert FileRegisteredEvent.decode(events[0].payload) == FileRegisteredEvent(
        size=2048, uploader=UPLOADER
    )


def test_event_payload_layout():
    payload = FileRegisteredEvent(size=2048, uploader=UPLOADER).encode()

    assert len(payload) == 64
    assert payload[:32] == (2048).to_bytes(32, "big")
    assert payload[32:] == UPLOADER


def test_event_decode_rejects_wrong_length():
    with pytest.raises(ValueError):
        FileRegisteredEvent.decode(b"\x00" * 63)


def test_listeners_receive_events(registry, context):
    received = []
    registry.subscribe(received.append)

    registry.register("bafy123", "report.pdf", 2048, context())

    assert received == [FileRegisteredEvent(size=2048, uploader=UPLOADER)]


def test_failing_listener_does_not_undo_registration(registry, context):
    def broken(event):
        raise RuntimeError("listener down")

    registry.subscribe(broken)
    assert registry.register("bafy123", "report.pdf", 2048, context()) is True
    assert registry.exists_only("bafy123") is True


def test_failed_registration_emits_nothing(registry, context):
    received = []
    registry.subscribe(received.append)
    registry.register("bafy123", "report.pdf", 2048, context())

    with pytest.raises(AlreadyRegisteredError):
        registry.register("bafy123", "report.pdf", 2048, context())

    assert len(received) == 1
    assert len(EventRepository.list_events()) == 1


def test_failure_mid_write_rolls_back(registry, context, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("disk full")

    monkeypatch.setattr(EventRepository, "append_event", staticmethod(boom))

    with pytest.raises(RuntimeError):
        registry.register("bafy123", "report.pdf", 2048, context())

    assert registry.exists_only("bafy123") is False
    assert registry.total_count() == 0
    assert registry.get_by_identifier("bafy123") == FileRecord.missing()


def test_list_records_pages(registry, context):
    for i in range(7):
        registry.register(f"bafy{i}", f"file{i}.txt", i + 1, context())

    total, records = registry.list_records(offset=2, limit=3)
    assert total == 7
    assert [r.identifier for r in records] == ["bafy2", "bafy3", "bafy4"]

    total, records = registry.list_records(offset=5, limit=10)
    assert [r.identifier for r in records] == ["bafy5", "bafy6"]

    total, records = registry.list_records(offset=10, limit=5)
    assert total == 7
    assert records == []


def test_list_records_rejects_negative_paging(registry):
    with pytest.raises(InvalidInputError):
        registry.list_records(offset=-1, limit=5)


def test_records_survive_redeploy(registry, context):
    registry.register("bafy123", "report.pdf", 2048, context(height=100))

    redeployed = deploy_registry(OPERATOR_HEX)

    assert redeployed.total_count() == 1
    assert redeployed.get_by_identifier("bafy123").name == "report.pdf"
    with pytest.raises(AlreadyRegisteredError):
        redeployed.register("bafy123", "again.pdf", 1, context())


def test_clock_advances_past_sealed_height(registry, context):
    first = registry.clock.next_context(UPLOADER)
    assert first.block_height == 1
    assert first.timestamp == FIXED_TIME

    registry.register("bafy123", "report.pdf", 2048, first)
    assert registry.clock.next_context(UPLOADER).block_height == 2

    registry.register("bafy456", "other.pdf", 1, context(height=100))
    assert registry.clock.current_height() == 100
    assert registry.clock.next_context(UPLOADER).block_height == 101


def test_clock_never_moves_backwards(registry, context):
    registry.register("bafy-high", "a", 1, context(height=50))
    registry.register("bafy-low", "b", 1, context(height=10))

    assert registry.clock.current_height() == 50


def test_concurrent_registrations_serialize(registry, context):
    errors = []

    def worker(start):
        for i in range(start, start + 10):
            try:
                registry.register(f"bafy-{i}", f"f{i}", i + 1, context())
            except Exception as e:
                errors.append(e)

    threads = [threading.Thread(target=worker, args=(n * 10,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert registry.total_count() == 40
    identifiers = {registry.get_by_ordinal(i).identifier for i in range(40)}
    assert identifiers == {f"bafy-{i}" for i in range(40)}


def test_concurrent_duplicates_admit_one(registry, context):
    outcomes = []

    def worker():
        try:
            outcomes.append(registry.register("bafy-race", "race.bin", 1, context()))
        except AlreadyRegisteredError:
            outcomes.append(False)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert outcomes.count(True) == 1
    assert registry.total_count() == 1
