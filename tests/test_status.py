"""Tests for support status classification."""

from datetime import date, datetime, timedelta

import pytest

from lifecycle_timeline.models import ComponentRecord, SupportStatus
from lifecycle_timeline.status import classify, count_statuses

NOW = date(2025, 6, 1)

# Higher rank means "more supported"
RANK = {
    SupportStatus.UNSUPPORTED: 0,
    SupportStatus.EXTENDED: 1,
    SupportStatus.SUPPORTED: 2,
}


def _component(standard=None, extended=None):
    return {"endOfStandardSupport": standard, "endOfExtendedSupport": extended}


class TestClassify:
    def test_extended_not_yet_announced_is_supported(self):
        component = _component("2020-01-01", "Not yet announced")
        assert classify(component, NOW) == SupportStatus.SUPPORTED

    def test_extended_absent_is_supported_even_if_standard_expired(self):
        assert classify(_component("2020-01-01", None), NOW) == SupportStatus.SUPPORTED
        assert classify(_component("2020-01-01", ""), NOW) == SupportStatus.SUPPORTED

    def test_both_absent_is_supported(self):
        assert classify(_component(), NOW) == SupportStatus.SUPPORTED

    def test_standard_in_future_is_supported(self):
        assert classify(_component("2027-06-15", "2029-06-15"), NOW) == SupportStatus.SUPPORTED

    def test_historical_standard_future_extended_is_extended(self):
        assert classify(_component("2024-01-01", "2026-01-01"), NOW) == SupportStatus.EXTENDED

    def test_both_past_is_unsupported(self):
        assert classify(_component("2022-03-31", "2024-03-31"), NOW) == SupportStatus.UNSUPPORTED

    def test_standard_not_announced_uses_extended_end(self):
        assert classify(_component("Not yet announced", "2026-01-01"), NOW) == SupportStatus.EXTENDED
        assert classify(_component("Not yet announced", "2025-01-01"), NOW) == SupportStatus.UNSUPPORTED

    def test_end_date_equal_to_now_is_over(self):
        assert classify(_component("2025-06-01", "2025-06-01"), NOW) == SupportStatus.UNSUPPORTED

    def test_malformed_extended_counts_as_not_announced(self):
        assert classify(_component(None, "TBD"), NOW) == SupportStatus.SUPPORTED
        assert classify(_component("2020-01-01", "TBD"), NOW) == SupportStatus.SUPPORTED
        assert classify(_component("2030-01-01", "TBD"), NOW) == SupportStatus.SUPPORTED

    def test_malformed_standard_behaves_like_absent(self):
        assert classify(_component("garbage", "2026-01-01"), NOW) == SupportStatus.EXTENDED

    def test_accepts_component_record(self):
        record = ComponentRecord.from_dict(_component("2024-01-01", "2026-01-01"))
        assert classify(record, NOW) == SupportStatus.EXTENDED

    def test_datetime_now_compares_by_day(self):
        component = _component("2025-06-01", "2026-01-01")
        assert classify(component, datetime(2025, 5, 31, 23, 59)) == SupportStatus.SUPPORTED
        assert classify(component, datetime(2025, 6, 1, 0, 1)) == SupportStatus.EXTENDED

    def test_scenario_b(self):
        component = _component("2024-01-01", "2026-01-01")
        assert classify(component, date(2025, 6, 1)) == SupportStatus.EXTENDED

    def test_idempotent(self):
        component = _component("2024-01-01", "2026-01-01")
        assert classify(component, NOW) == classify(component, NOW)


class TestMonotonicInNow:
    @pytest.mark.parametrize(
        "component",
        [
            _component("2027-06-15", "2029-06-15"),
            _component("2024-01-01", "2026-01-01"),
            _component("Not yet announced", "2028-12-31"),
            _component("2029-01-01", "2027-01-01"),
            _component("garbage", "2026-06-30"),
            _component("2026-01-01", "Not yet announced"),
        ],
    )
    def test_status_never_improves_as_time_passes(self, component):
        day = date(2023, 1, 1)
        previous = classify(component, day)
        while day < date(2033, 1, 1):
            day += timedelta(days=30)
            current = classify(component, day)
            assert RANK[current] <= RANK[previous]
            previous = current


class TestCountStatuses:
    def test_counts(self):
        components = [
            _component("2027-06-15", "2029-06-15"),
            _component("2024-01-01", "2026-01-01"),
            _component("2022-03-31", "2024-03-31"),
            _component("2030-01-01", "Not yet announced"),
        ]
        counts = count_statuses(components, NOW)
        assert counts.as_dict() == {"all": 4, "supported": 2, "extended": 1, "unsupported": 1}

    def test_empty(self):
        assert count_statuses([], NOW).as_dict() == {"all": 0, "supported": 0, "extended": 0, "unsupported": 0}
