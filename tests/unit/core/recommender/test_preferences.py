#!/usr/bin/env python3
"""
Test suite for request parameter normalization.
"""

import unittest

from core.config_loader import RecommenderConfig
from core.recommender.preferences import build_preferences, clamp_limit


class TestBuildPreferences(unittest.TestCase):

    def setUp(self):
        self.config = RecommenderConfig(default_limit=20, max_limit=50, default_min_score=60)

    def test_defaults(self):
        prefs = build_preferences(self.config)

        self.assertIsNone(prefs.target_gender)
        self.assertEqual(prefs.age_min, 0)
        self.assertEqual(prefs.age_max, 0)
        self.assertEqual(prefs.min_score, 60)
        self.assertEqual(prefs.cursor, 0)
        self.assertEqual(prefs.limit, 20)

    def test_parses_string_params(self):
        prefs = build_preferences(
            self.config,
            gender="f",
            age_min="21",
            age_max="35",
            min_score="75",
            cursor="120",
            limit="10"
        )

        self.assertEqual(prefs.target_gender, "F")
        self.assertEqual(prefs.age_min, 21)
        self.assertEqual(prefs.age_max, 35)
        self.assertEqual(prefs.min_score, 75)
        self.assertEqual(prefs.cursor, 120)
        self.assertEqual(prefs.limit, 10)

    def test_gender_uses_first_letter(self):
        prefs = build_preferences(self.config, gender="male")
        self.assertEqual(prefs.target_gender, "M")

    def test_blank_gender_is_unset(self):
        prefs = build_preferences(self.config, gender="  ")
        self.assertIsNone(prefs.target_gender)

    def test_limit_out_of_range_uses_default(self):
        self.assertEqual(build_preferences(self.config, limit="0").limit, 20)
        self.assertEqual(build_preferences(self.config, limit="-3").limit, 20)
        self.assertEqual(build_preferences(self.config, limit="51").limit, 20)
        self.assertEqual(build_preferences(self.config, limit="abc").limit, 20)

    def test_limit_bounds_inclusive(self):
        self.assertEqual(build_preferences(self.config, limit="1").limit, 1)
        self.assertEqual(build_preferences(self.config, limit="50").limit, 50)

    def test_min_score_out_of_range_uses_default(self):
        self.assertEqual(build_preferences(self.config, min_score="101").min_score, 60)
        self.assertEqual(build_preferences(self.config, min_score="-1").min_score, 60)
        self.assertEqual(build_preferences(self.config, min_score="x").min_score, 60)

    def test_min_score_zero_is_explicit(self):
        self.assertEqual(build_preferences(self.config, min_score="0").min_score, 0)

    def test_negative_values_unset(self):
        prefs = build_preferences(self.config, age_min=-5, age_max="-1", cursor=-10)
        self.assertEqual(prefs.age_min, 0)
        self.assertEqual(prefs.age_max, 0)
        self.assertEqual(prefs.cursor, 0)


class TestClampLimit(unittest.TestCase):

    def test_default_never_exceeds_max(self):
        config = RecommenderConfig(default_limit=100, max_limit=25)
        self.assertEqual(clamp_limit(None, config), 25)

    def test_in_range(self):
        config = RecommenderConfig()
        self.assertEqual(clamp_limit(7, config), 7)


if __name__ == '__main__':
    unittest.main()
