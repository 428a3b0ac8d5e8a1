#!/usr/bin/env python3
"""
Unit tests for per-freelancer aggregation, report filtering and time ranges.
"""

import unittest
from datetime import datetime, timedelta, timezone

from freelancer_scoring.exceptions import InvalidTimeRangeError
from freelancer_scoring.quality.aggregation import (
    aggregate_by_freelancer, aggregate_freelancer_scores, filter_reports,
    qualifying_reports, time_range_cutoff
)
from freelancer_scoring.quality.models import QualityReportFilter
from tests.fixtures.record_fixtures import REFERENCE_NOW, make_report


class TestAggregateFreelancerScores(unittest.TestCase):
    """Tests for aggregate_freelancer_scores."""

    def test_01_averages_and_combined(self):
        """Test averaging over qualifying reports only."""
        print("\n📊 UNIT Test 1: Freelancer Aggregation")

        reports = [
            make_report(id="a", lqa_score=90, qs_score=4),
            make_report(id="b", status="translator_accepted", lqa_score=80),
            make_report(id="c", status="draft", lqa_score=10, qs_score=1),
            make_report(id="d", status="translator_disputed", lqa_score=20),
        ]
        summary = aggregate_freelancer_scores(reports, freelancer_id="fl_001")

        self.assertEqual(summary.freelancer_id, "fl_001")
        self.assertEqual(summary.total_reviews, 2)
        self.assertAlmostEqual(summary.avg_lqa, 85.0)
        self.assertAlmostEqual(summary.avg_qs, 4.0)
        # (85*4 + 4*20) / 5 = 84
        self.assertAlmostEqual(summary.combined_score, 84.0)
        self.assertFalse(summary.is_probation)
        self.assertEqual(summary.lqa_count, 2)
        self.assertEqual(summary.qs_count, 1)

        print(f"  ✓ Combined score: {summary.combined_score:.1f}")

    def test_02_no_qualifying_reports(self):
        """No qualifying reports -> no combined score and no probation."""
        reports = [make_report(status="draft", lqa_score=30)]
        summary = aggregate_freelancer_scores(reports)

        self.assertIsNone(summary.avg_lqa)
        self.assertIsNone(summary.avg_qs)
        self.assertIsNone(summary.combined_score)
        self.assertFalse(summary.is_probation)
        self.assertEqual(summary.total_reviews, 0)

    def test_03_qualifying_reports_without_scores(self):
        summary = aggregate_freelancer_scores([make_report()])
        self.assertEqual(summary.total_reviews, 1)
        self.assertIsNone(summary.combined_score)
        self.assertFalse(summary.is_probation)

    def test_04_probation_flag(self):
        reports = [make_report(report_type="QS", qs_score=3)]
        summary = aggregate_freelancer_scores(reports, {"probation_threshold": 70})
        self.assertAlmostEqual(summary.combined_score, 60.0)
        self.assertTrue(summary.is_probation)

    def test_05_empty(self):
        summary = aggregate_freelancer_scores([])
        self.assertEqual(summary.total_reviews, 0)
        self.assertIsNone(summary.combined_score)


class TestAggregateByFreelancer(unittest.TestCase):

    def test_groups_by_freelancer(self):
        reports = [
            make_report(id="1", freelancer_id="fl_a", lqa_score=90),
            make_report(id="2", freelancer_id="fl_b", lqa_score=60),
            make_report(id="3", freelancer_id="fl_a", lqa_score=70),
            make_report(id="4", freelancer_id=None, lqa_score=10),
        ]
        summaries = aggregate_by_freelancer(reports)

        self.assertEqual(set(summaries), {"fl_a", "fl_b"})
        self.assertAlmostEqual(summaries["fl_a"].avg_lqa, 80.0)
        self.assertEqual(summaries["fl_a"].freelancer_id, "fl_a")
        self.assertTrue(summaries["fl_b"].is_probation)


class TestQualifyingReports(unittest.TestCase):

    def test_only_finalized_and_accepted(self):
        statuses = [
            "draft", "pending_translator_review", "pending_final_review",
            "translator_disputed", "translator_accepted", "finalized",
        ]
        reports = [make_report(id=s, status=s) for s in statuses]
        kept = [r.status for r in qualifying_reports(reports)]
        self.assertEqual(kept, ["translator_accepted", "finalized"])


class TestFilterReports(unittest.TestCase):

    def setUp(self):
        self.reports = [
            make_report(id="1", client_account="Acme", source_language="English",
                        target_language="Turkish", translation_type="Legal",
                        created_date=datetime(2026, 10, 1)),
            make_report(id="2", client_account="Globex", source_language="English",
                        target_language="German", translation_type="Marketing",
                        created_date=datetime(2026, 6, 1)),
            make_report(id="3", client_account="Acme", source_language="German",
                        target_language="Turkish", translation_type="Legal",
                        report_date=datetime(2026, 9, 1), created_date=datetime(2025, 1, 1)),
            make_report(id="4", client_account="Acme", created_date=None),
        ]

    def test_no_filter_returns_all(self):
        self.assertEqual(len(filter_reports(self.reports)), 4)
        self.assertEqual(len(filter_reports(self.reports, QualityReportFilter())), 4)

    def test_facets_combine(self):
        f = QualityReportFilter(client_account="Acme", target_language="Turkish")
        self.assertEqual([r.id for r in filter_reports(self.reports, f)], ["1", "3"])

    def test_since_uses_report_date_first(self):
        f = QualityReportFilter(since=datetime(2026, 8, 1))
        self.assertEqual([r.id for r in filter_reports(self.reports, f)], ["1", "3"])

    def test_since_with_aware_datetime(self):
        f = QualityReportFilter(since=datetime(2026, 9, 30, 20, 0, tzinfo=timezone(timedelta(hours=-3))))
        self.assertEqual([r.id for r in filter_reports(self.reports, f)], ["1"])


class TestTimeRangeCutoff(unittest.TestCase):

    def test_known_ranges(self):
        self.assertEqual(time_range_cutoff("1month", REFERENCE_NOW), datetime(2026, 9, 18, 12, 0))
        self.assertEqual(time_range_cutoff("3months", REFERENCE_NOW), datetime(2026, 7, 18, 12, 0))
        self.assertEqual(time_range_cutoff("6months", REFERENCE_NOW), datetime(2026, 4, 18, 12, 0))
        self.assertEqual(time_range_cutoff("1year", REFERENCE_NOW), datetime(2025, 10, 18, 12, 0))

    def test_all_has_no_cutoff(self):
        self.assertIsNone(time_range_cutoff("all", REFERENCE_NOW))

    def test_unknown_range(self):
        with self.assertRaises(InvalidTimeRangeError):
            time_range_cutoff("2weeks", REFERENCE_NOW)


if __name__ == '__main__':
    unittest.main()
