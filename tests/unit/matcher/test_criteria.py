#!/usr/bin/env python3
"""
Unit tests for individual match criteria.
"""

import unittest

from freelancer_scoring.matcher.criteria import (
    score_experience, score_languages, score_service_types, score_skills,
    score_specializations, skill_matches
)
from tests.fixtures.record_fixtures import make_freelancer, make_job


class TestScoreLanguages(unittest.TestCase):

    def test_sufficient_proficiency(self):
        job = make_job(required_languages=[{"language": "English", "min_proficiency": "Professional"}])
        points, max_points, details = score_languages(make_freelancer(), job, 40)

        self.assertEqual((points, max_points), (40, 40))
        self.assertEqual(details[0].type, "match")
        self.assertEqual(details[0].text, "English (Fluent)")
        self.assertEqual(details[0].criterion, "languages")

    def test_weight_split_across_languages(self):
        job = make_job(required_languages=[
            {"language": "Turkish", "min_proficiency": "Native"},
            {"language": "English", "min_proficiency": "Native"},
            {"language": "German", "min_proficiency": "Intermediate"},
            {"language": "French"},
        ])
        points, max_points, details = score_languages(make_freelancer(), job, 40)

        self.assertAlmostEqual(points, 10.0)
        self.assertEqual(max_points, 40)
        self.assertEqual([d.type for d in details], ["match", "partial", "miss", "miss"])
        self.assertEqual(details[1].text, "English (needs Native, has Fluent)")
        self.assertEqual(details[2].text, "Missing German")

    def test_proficiency_labels_case_insensitive(self):
        freelancer = make_freelancer(languages=[{"language": "Spanish", "proficiency": "fluent"}])
        job = make_job(required_languages=[{"language": "Spanish", "min_proficiency": "PROFESSIONAL"}])
        points, _, _ = score_languages(freelancer, job, 40)
        self.assertEqual(points, 40)

    def test_no_minimum_accepts_any_listed_language(self):
        freelancer = make_freelancer(languages=[{"language": "Spanish"}])
        job = make_job(required_languages=[{"language": "Spanish"}])
        points, _, details = score_languages(freelancer, job, 40)
        self.assertEqual(points, 40)
        self.assertEqual(details[0].type, "match")
        self.assertEqual(details[0].text, "Spanish")

    def test_unknown_freelancer_proficiency_ranks_lowest(self):
        freelancer = make_freelancer(languages=[{"language": "Spanish", "proficiency": "Conversational"}])
        job = make_job(required_languages=[{"language": "Spanish", "min_proficiency": "Intermediate"}])
        with self.assertLogs("freelancer_scoring.matcher.criteria", level="WARNING"):
            points, _, details = score_languages(freelancer, job, 40)
        self.assertEqual(points, 0)
        self.assertEqual(details[0].type, "partial")

    def test_not_required(self):
        self.assertEqual(score_languages(make_freelancer(), make_job(), 40), (0.0, 0.0, []))


class TestOverlapCriteria(unittest.TestCase):

    def test_partial_service_overlap(self):
        job = make_job(required_service_types=["Translation", "Transcreation"])
        points, max_points, details = score_service_types(make_freelancer(), job, 20)

        self.assertAlmostEqual(points, 10.0)
        self.assertEqual(max_points, 20)
        self.assertEqual(len(details), 1)
        self.assertEqual(details[0].type, "match")
        self.assertEqual(details[0].text, "Services: Translation")

    def test_service_miss_emits_detail(self):
        job = make_job(required_service_types=["Interpreting"])
        points, max_points, details = score_service_types(make_freelancer(), job, 20)

        self.assertEqual((points, max_points), (0, 20))
        self.assertEqual(details[0].type, "miss")
        self.assertEqual(details[0].text, "Missing services")

    def test_specializations(self):
        job = make_job(required_specializations=["Legal", "Medical", "Finance", "Gaming"])
        points, _, details = score_specializations(make_freelancer(), job, 20)
        self.assertAlmostEqual(points, 10.0)
        self.assertEqual(details[0].text, "Specializations: Legal, Medical")

        job = make_job(required_specializations=["Gaming"])
        _, _, details = score_specializations(make_freelancer(), job, 20)
        self.assertEqual(details[0].text, "Missing specializations")

    def test_overlap_is_exact(self):
        job = make_job(required_service_types=["translation"])
        points, _, _ = score_service_types(make_freelancer(), job, 20)
        self.assertEqual(points, 0)


class TestScoreExperience(unittest.TestCase):

    def test_meets_minimum(self):
        job = make_job(min_experience_years=8)
        points, max_points, details = score_experience(make_freelancer(), job, 10)
        self.assertEqual((points, max_points), (10, 10))
        self.assertEqual(details[0].text, "8 years experience")

    def test_below_minimum(self):
        job = make_job(min_experience_years=10)
        points, max_points, details = score_experience(make_freelancer(experience_years=3.5), job, 10)
        self.assertEqual((points, max_points), (0, 10))
        self.assertEqual(details[0].type, "miss")
        self.assertEqual(details[0].text, "Only 3.5 years (needs 10)")

    def test_missing_experience_counts_as_zero(self):
        job = make_job(min_experience_years=1)
        points, _, details = score_experience(make_freelancer(experience_years=None), job, 10)
        self.assertEqual(points, 0)
        self.assertEqual(details[0].text, "Only 0 years (needs 1)")

    def test_zero_minimum_not_required(self):
        self.assertEqual(score_experience(make_freelancer(), make_job(min_experience_years=0), 10),
                         (0.0, 0.0, []))


class TestScoreSkills(unittest.TestCase):

    def test_skill_matches_either_direction(self):
        self.assertTrue(skill_matches("trados", "SDL Trados"))
        self.assertTrue(skill_matches("SDL Trados Studio 2022", "sdl trados"))
        self.assertFalse(skill_matches("Phrase", "memoQ"))
        self.assertFalse(skill_matches("", "memoQ"))
        self.assertFalse(skill_matches("memoQ", "   "))

    def test_fuzzy_skill_overlap(self):
        job = make_job(required_skills=["Trados", "MEMOQ", "Phrase"])
        points, max_points, details = score_skills(make_freelancer(), job, 10)
        self.assertAlmostEqual(points, 10 * 2 / 3)
        self.assertEqual(max_points, 10)
        self.assertEqual(details[0].text, "Skills: Trados, MEMOQ")

    def test_no_skill_overlap(self):
        job = make_job(required_skills=["Phrase"])
        points, _, details = score_skills(make_freelancer(skills=[]), job, 10)
        self.assertEqual(points, 0)
        self.assertEqual(details[0].type, "miss")


if __name__ == '__main__':
    unittest.main()
