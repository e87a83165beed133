#!/usr/bin/env python3
"""
Test suite for the compatibility scorer.
"""

import random
import unittest

from core.recommender import scorer
from core.recommender.scorer import score, match_percentage
from tests.mocks.profile_store_mocks import make_profile


class TestScore(unittest.TestCase):
    """Test raw score computation."""

    def test_identical_profiles_score_maximum(self):
        """Viewer traits (80,80,80,80) total 80 vs identical candidate."""
        viewer = make_profile(1, total=80, traits=(80, 80, 80, 80))
        candidate = make_profile(2, total=80, traits=(80, 80, 80, 80))

        raw, reasons = score(viewer, candidate)

        self.assertAlmostEqual(raw, 75.0, places=9)
        self.assertEqual(match_percentage(raw), 100)
        self.assertEqual(reasons, ["total_score_proximity", "traits_match"])

    def test_total_score_far_apart_traits_identical(self):
        """Total 80 vs 0 with identical traits: 0 + 40 points."""
        viewer = make_profile(1, total=80, traits=(55, 65, 75, 85))
        candidate = make_profile(2, total=0, traits=(55, 65, 75, 85))

        raw, _ = score(viewer, candidate)

        self.assertAlmostEqual(raw, 40.0 + 35.0 * 0.2, places=9)

    def test_scenario_total_component_zero(self):
        """Total difference of 100 zeroes the proximity component."""
        viewer = make_profile(1, total=100, traits=(50, 50, 50, 50))
        candidate = make_profile(2, total=0, traits=(50, 50, 50, 50))

        raw, _ = score(viewer, candidate)

        self.assertAlmostEqual(raw, 40.0, places=9)
        self.assertEqual(match_percentage(raw), 53)

    def test_trait_weights(self):
        """Only personality differs by 100: loses 0.3 * 40 = 12 points."""
        viewer = make_profile(1, total=50, traits=(100, 50, 50, 50))
        candidate = make_profile(2, total=50, traits=(0, 50, 50, 50))

        raw, _ = score(viewer, candidate)

        self.assertAlmostEqual(raw, 75.0 - 12.0, places=9)

    def test_emotional_weight(self):
        """Only emotional differs by 50: loses 0.2 * 0.5 * 40 = 4 points."""
        viewer = make_profile(1, total=50, traits=(50, 50, 100, 50))
        candidate = make_profile(2, total=50, traits=(50, 50, 50, 50))

        raw, _ = score(viewer, candidate)

        self.assertAlmostEqual(raw, 71.0, places=9)

    def test_opposite_profiles_score_zero(self):
        viewer = make_profile(1, total=100, traits=(100, 100, 100, 100))
        candidate = make_profile(2, total=0, traits=(0, 0, 0, 0))

        raw, _ = score(viewer, candidate)

        self.assertAlmostEqual(raw, 0.0, places=9)
        self.assertEqual(match_percentage(raw), 0)

    def test_distance_is_accepted_and_ignored(self):
        viewer = make_profile(1, total=60, traits=(10, 20, 30, 40))
        candidate = make_profile(2, total=90, traits=(40, 30, 20, 10))

        self.assertEqual(
            score(viewer, candidate, distance_km=0.0),
            score(viewer, candidate, distance_km=250.0)
        )

    def test_symmetric_and_bounded(self):
        """score(a, b) == score(b, a) and stays within [0, 75]."""
        rng = random.Random(7)
        for _ in range(500):
            a = make_profile(1, total=rng.randint(0, 100),
                             traits=[rng.randint(0, 100) for _ in range(4)])
            b = make_profile(2, total=rng.randint(0, 100),
                             traits=[rng.randint(0, 100) for _ in range(4)])

            raw_ab, reasons_ab = score(a, b)
            raw_ba, reasons_ba = score(b, a)

            self.assertEqual(raw_ab, raw_ba)
            self.assertEqual(reasons_ab, reasons_ba)
            self.assertGreaterEqual(raw_ab, 0.0)
            self.assertLessEqual(raw_ab, scorer.MAX_RAW_SCORE)

    def test_deterministic(self):
        viewer = make_profile(1, total=33, traits=(1, 2, 3, 4))
        candidate = make_profile(2, total=77, traits=(9, 8, 7, 6))

        self.assertEqual(score(viewer, candidate), score(viewer, candidate))


class TestMatchPercentage(unittest.TestCase):
    """Test raw score to percentage rescaling."""

    def test_rounding(self):
        self.assertEqual(match_percentage(40.0), 53)
        self.assertEqual(match_percentage(37.5), 50)
        self.assertEqual(match_percentage(0.0), 0)

    def test_capped_at_100(self):
        self.assertEqual(match_percentage(75.0), 100)
        self.assertEqual(match_percentage(80.0), 100)

    def test_range(self):
        for raw in [x * 0.25 for x in range(0, 301)]:
            pct = match_percentage(raw)
            self.assertGreaterEqual(pct, 0)
            self.assertLessEqual(pct, 100)


if __name__ == '__main__':
    unittest.main()
