"""
Unit tests for local timeline building and deduplication
"""

import pytest
from logweave.context.building import LocalTimeline, PatternComparator
from logweave.protocols import DuplicateComparatorProtocol


class TestDeduplication:
    """Test folding of duplicate runs"""

    @pytest.mark.parametrize("count", [3, 4, 10, 250])
    def test_run_of_duplicates_keeps_two_entries(self, make_event, count):
        """N identical events after a distinct one fold into 2 entries"""
        timeline = LocalTimeline()
        timeline = timeline.add(make_event(0, message="boot"))
        for s in range(1, count + 1):
            timeline = timeline.add(make_event(s, message="retrying"))

        assert len(timeline) == 3
        assert timeline[1].repetition_count == count - 1
        assert timeline[1].timestamp < timeline[2].timestamp
        assert timeline[2].timestamp == make_event(count).timestamp

    @pytest.mark.parametrize("count", [3, 5, 40])
    def test_identical_events_only(self, make_event, count):
        """A timeline made only of N identical events holds 2 entries"""
        timeline = LocalTimeline()
        for s in range(count):
            timeline = timeline.add(make_event(s, message="retrying"))

        assert len(timeline) == 2
        assert timeline[0].repetition_count == count - 1

    def test_last_entry_tracks_latest_occurrence(self, make_event):
        """The second stored entry is overwritten by each new occurrence"""
        timeline = LocalTimeline()
        timeline = timeline.add(make_event(0, message="boot"))
        latest = None
        for s in range(1, 6):
            latest = make_event(s, message="retrying")
            timeline = timeline.add(latest)

        assert timeline[-1] == latest

    def test_run_at_timeline_start_is_not_folded_early(self, make_event):
        """With fewer than two stored events nothing is folded"""
        timeline = LocalTimeline()
        timeline = timeline.add(make_event(0, message="retrying"))
        timeline = timeline.add(make_event(1, message="retrying"))

        assert len(timeline) == 2
        assert all(e.repetition_count == 1 for e in timeline)

    def test_distinct_events_are_appended(self, make_event):
        """Different messages never fold"""
        timeline = LocalTimeline()
        for s, message in enumerate(["a", "b", "a", "b"]):
            timeline = timeline.add(make_event(s, message=message))

        assert len(timeline) == 4

    def test_same_message_different_pattern_is_not_duplicate(self, make_event):
        """Matcher name is part of event identity"""
        timeline = LocalTimeline()
        timeline = timeline.add(make_event(0, message="x", pattern="p1"))
        timeline = timeline.add(make_event(1, message="x", pattern="p1"))
        timeline = timeline.add(make_event(2, message="x", pattern="p2"))

        assert len(timeline) == 3

    def test_untimed_events_are_accepted(self, make_event):
        """Continuation lines without timestamps are stored like any event"""
        timeline = LocalTimeline()
        timeline = timeline.add(make_event(0, message="start"))
        timeline = timeline.add(make_event(None, message="  continued"))

        assert len(timeline) == 2
        assert timeline[1].timestamp is None


class TestCustomComparator:
    """Test caller-supplied duplicate comparison"""

    def test_custom_comparator_is_used(self, make_event):
        """Everything is a duplicate with an always-true comparator"""
        class AlwaysDuplicate(DuplicateComparatorProtocol):
            def is_duplicate(self, event, base, previous):
                return True

        timeline = LocalTimeline(comparator=AlwaysDuplicate())
        for s, message in enumerate(["a", "b", "c", "d"]):
            timeline = timeline.add(make_event(s, message=message))

        assert len(timeline) == 2
        assert timeline[0].repetition_count == 3
        assert timeline[1].message == "d"

    def test_default_comparator(self):
        timeline = LocalTimeline()
        assert isinstance(timeline.comparator, PatternComparator)

    def test_slices_keep_comparator(self, make_timeline):
        """Slicing and concatenation produce timelines with the same comparator"""
        timeline = make_timeline([1, 2, 3])

        assert isinstance(timeline[1:], LocalTimeline)
        assert timeline[1:].comparator is timeline.comparator
        assert isinstance(timeline + timeline, LocalTimeline)
        assert len(timeline + timeline) == 6


class TestValueSemantics:
    """Test that stored events are never shared with callers or other timelines"""

    def test_same_instance_added_repeatedly(self, make_event):
        event = make_event(1, message="retrying")
        timeline = LocalTimeline()
        for _ in range(4):
            timeline = timeline.add(event)

        assert [e.repetition_count for e in timeline] == [3, 1]
        assert event.repetition_count == 1

    def test_folding_does_not_touch_source_timeline(self, make_event):
        """Adding to a concatenated timeline leaves the original events alone"""
        source = LocalTimeline()
        source = source.add(make_event(1, message="retrying"))
        source = source.add(make_event(2, message="retrying"))

        extended = source + LocalTimeline()
        extended = extended.add(make_event(3, message="retrying"))

        assert extended[0].repetition_count == 2
        assert [e.repetition_count for e in source] == [1, 1]
        assert source[-1].timestamp == make_event(2).timestamp
