import unittest

from route_risk.domain import RiskTier
from route_risk.risk import (
    TIER_COLORS,
    TIER_RECOMMENDATIONS,
    classify,
    color_for,
    legend,
    recommendation_for,
    tier_for,
)


class TestTierBoundaries(unittest.TestCase):
    def test_three_is_low(self):
        self.assertEqual(classify(3).tier, RiskTier.LOW)

    def test_four_is_medium(self):
        self.assertEqual(classify(4).tier, RiskTier.MEDIUM)

    def test_six_is_medium(self):
        self.assertEqual(classify(6).tier, RiskTier.MEDIUM)

    def test_seven_is_high(self):
        self.assertEqual(classify(7).tier, RiskTier.HIGH)

    def test_full_scale(self):
        for risk in range(0, 11):
            tier = classify(risk).tier
            self.assertEqual(tier == RiskTier.HIGH, risk >= 7, risk)
            self.assertEqual(tier == RiskTier.MEDIUM, 4 <= risk < 7, risk)
            self.assertEqual(tier == RiskTier.LOW, risk < 4, risk)

    def test_out_of_range_values_extend_the_same_rule(self):
        self.assertEqual(tier_for(-3), RiskTier.LOW)
        self.assertEqual(tier_for(11), RiskTier.HIGH)
        self.assertEqual(tier_for(250), RiskTier.HIGH)


class TestClassify(unittest.TestCase):
    def test_colors_are_one_per_tier(self):
        self.assertEqual(classify(9).color, "#F44336")
        self.assertEqual(classify(5).color, "#FF9800")
        self.assertEqual(classify(1).color, "#4CAF50")
        self.assertEqual(len(set(TIER_COLORS.values())), 3)

    def test_recommendations(self):
        self.assertIn("25%", classify(8).recommendation)
        self.assertIn("backup delivery route", classify(6).recommendation)
        self.assertEqual(classify(0).recommendation, "No action needed. Route appears stable.")

    def test_color_and_recommendation_follow_tier(self):
        for tier in RiskTier:
            self.assertEqual(color_for(tier), TIER_COLORS[tier])
            self.assertEqual(recommendation_for(tier), TIER_RECOMMENDATIONS[tier])

    def test_deterministic(self):
        self.assertEqual(classify(6), classify(6))
        self.assertEqual(classify(6).model_dump(), classify(6).model_dump())

    def test_keeps_source_value(self):
        self.assertEqual(classify(4).risk_level, 4)

    def test_legend_is_low_to_high(self):
        self.assertEqual(
            [entry["tier"] for entry in legend()],
            ["Low", "Medium", "High"],
        )


if __name__ == "__main__":
    unittest.main()
