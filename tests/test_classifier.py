"""Tests for line classification and #template tracking."""

from datetime import date
from typing import get_type_hints

import pytest

from npstats.core.classifier import (
    CALENDAR_PROFILE,
    NOTE_PROFILE,
    Classification,
    LineKind,
    TemplateTracker,
    classify_line,
    heading_level,
)


@pytest.fixture
def today():
    return date(2025, 1, 15)


@pytest.fixture
def tracker():
    return TemplateTracker()


def kind_of(line, tracker, today, profile=NOTE_PROFILE):
    return classify_line(line, tracker, today, profile).kind


class TestTaskLines:
    def test_done_with_date(self, tracker, today):
        result = classify_line("* [x] done @done(2020-01-15)", tracker, today)
        assert result.kind == LineKind.DONE
        assert result.on == date(2020, 1, 15)

    def test_done_with_time_in_date(self, tracker, today):
        result = classify_line("* [x] done @done(2020-01-15 09:30)", tracker, today)
        assert result.on == date(2020, 1, 15)

    def test_done_without_date(self, tracker, today):
        result = classify_line("* [x] done", tracker, today)
        assert result.kind == LineKind.DONE
        assert result.on is None

    def test_done_with_malformed_date(self, tracker, today):
        result = classify_line("* [x] done @done(2020-13-45)", tracker, today)
        assert result.kind == LineKind.DONE
        assert result.on is None

    def test_waiting(self, tracker, today):
        assert kind_of("* waiting item #waiting", tracker, today) == LineKind.WAITING

    def test_future(self, tracker, today):
        result = classify_line("* task >2099-01-01", tracker, today)
        assert result.kind == LineKind.FUTURE
        assert result.on == date(2099, 1, 1)

    def test_overdue(self, tracker, today):
        assert kind_of("* task >2020-01-01", tracker, today) == LineKind.OVERDUE

    def test_scheduled_today_is_overdue(self, tracker, today):
        assert kind_of("* task >2025-01-15", tracker, today) == LineKind.OVERDUE

    def test_undated(self, tracker, today):
        assert kind_of("* task", tracker, today) == LineKind.UNDATED

    def test_malformed_schedule_is_undated(self, tracker, today):
        assert kind_of("* task >2020-13-45", tracker, today) == LineKind.UNDATED

    def test_last_schedule_marker_wins(self, tracker, today):
        assert kind_of("* task >2020-01-01 >2099-01-01", tracker, today) == LineKind.FUTURE

    def test_schedule_needs_leading_space(self, tracker, today):
        assert kind_of("* task x>2020-01-01", tracker, today) == LineKind.UNDATED

    def test_indented_task(self, tracker, today):
        assert kind_of("    * sub task", tracker, today) == LineKind.UNDATED

    def test_cancelled_is_not_a_task(self, tracker, today):
        assert kind_of("* [-] dropped >2020-01-01", tracker, today) == LineKind.NON_TASK

    def test_waiting_with_schedule_is_waiting(self, tracker, today):
        assert kind_of("* item #waiting >2099-01-01", tracker, today) == LineKind.WAITING


class TestNonTaskLines:
    @pytest.mark.parametrize(
        "line",
        ["plain text", "", "- dash item", "*bold* text", "> quote", "@done(2020-01-15)"],
    )
    def test_non_task(self, line, tracker, today):
        assert kind_of(line, tracker, today) == LineKind.NON_TASK

    def test_heading(self, tracker, today):
        assert kind_of("## Heading", tracker, today) == LineKind.HEADING

    def test_hashtag_is_not_heading(self, tracker, today):
        assert kind_of("#project", tracker, today) == LineKind.NON_TASK

    def test_heading_level(self):
        assert heading_level("### Three") == 3
        assert heading_level("#tag") == 0
        assert heading_level("text") == 0


class TestCaseSensitivity:
    def test_upper_case_waiting_is_not_waiting(self, tracker, today):
        assert kind_of("* item #Waiting", tracker, today) == LineKind.UNDATED

    def test_upper_case_x_is_not_done(self, tracker, today):
        assert kind_of("* [X] item", tracker, today) == LineKind.UNDATED


class TestTemplateSections:
    def test_open_tasks_suppressed_under_template_heading(self, tracker, today):
        assert kind_of("## Checklist #template", tracker, today) == LineKind.HEADING
        assert tracker.level == 2
        assert kind_of("* open", tracker, today) == LineKind.SUPPRESSED
        assert kind_of("* item #waiting", tracker, today) == LineKind.SUPPRESSED
        assert kind_of("* item >2099-01-01", tracker, today) == LineKind.SUPPRESSED

    def test_done_counted_inside_template(self, tracker, today):
        kind_of("## Checklist #template", tracker, today)
        result = classify_line("* [x] done @done(2020-01-15)", tracker, today)
        assert result.kind == LineKind.DONE
        assert result.on == date(2020, 1, 15)

    def test_deeper_heading_keeps_suppression(self, tracker, today):
        kind_of("## Checklist #template", tracker, today)
        kind_of("### Sub", tracker, today)
        assert kind_of("* open", tracker, today) == LineKind.SUPPRESSED

    def test_same_level_heading_ends_suppression(self, tracker, today):
        kind_of("## Checklist #template", tracker, today)
        kind_of("## Real work", tracker, today)
        assert tracker.level == 0
        assert kind_of("* open", tracker, today) == LineKind.UNDATED

    def test_higher_level_heading_ends_suppression(self, tracker, today):
        kind_of("## Checklist #template", tracker, today)
        kind_of("# Top", tracker, today)
        assert kind_of("* open", tracker, today) == LineKind.UNDATED

    def test_same_level_template_heading_restarts_suppression(self, tracker, today):
        kind_of("## One #template", tracker, today)
        kind_of("## Two #template", tracker, today)
        assert tracker.level == 2

    def test_calendar_profile_ignores_templates(self, tracker, today):
        kind_of("## Checklist #template", tracker, today, CALENDAR_PROFILE)
        assert tracker.level == 0
        assert kind_of("* open", tracker, today, CALENDAR_PROFILE) == LineKind.UNDATED


class TestClassificationTotality:
    @pytest.mark.parametrize(
        "line",
        [
            "# Title",
            "* [x] a @done(2020-01-01)",
            "* [-] b",
            "* c #waiting",
            "* d >2099-01-01",
            "* e >2000-01-01",
            "* f",
            "text",
            "",
        ],
    )
    def test_exactly_one_kind(self, line, tracker, today):
        result = classify_line(line, tracker, today)
        assert isinstance(result.kind, LineKind)


class TestClassification:
    def test_no_date_by_default(self):
        assert Classification(LineKind.HEADING).on is None

    def test_field_annotations_resolve(self):
        hints = get_type_hints(Classification)
        assert hints["kind"] is LineKind
        assert hints["on"] == (date | None)
