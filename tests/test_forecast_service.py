import unittest

from route_risk.data_sources.fallback import FALLBACK_FORECAST
from route_risk.domain import RiskFactor, RiskTier, WeatherForecastDay
from route_risk.forecast_service import (
    classify_forecast,
    compose_route_risk,
    default_route_factors,
    estimate_flood_risk,
    summarize_forecast,
)


def _day(date, precipitation, flood_risk):
    return WeatherForecastDay(
        date=date,
        conditions="Rain",
        temperature=50,
        precipitation=precipitation,
        flood_risk=flood_risk,
    )


class TestClassifyForecast(unittest.TestCase):
    def test_tiers_follow_flood_risk_in_order(self):
        days = classify_forecast(FALLBACK_FORECAST)
        self.assertEqual(
            [d.tier for d in days],
            [RiskTier.LOW, RiskTier.MEDIUM, RiskTier.HIGH, RiskTier.MEDIUM, RiskTier.LOW],
        )
        self.assertEqual(days[2].color, "#F44336")
        self.assertEqual([d.day.date for d in days], [d.date for d in FALLBACK_FORECAST])


class TestSummarizeForecast(unittest.TestCase):
    def test_peak_and_totals(self):
        outlook = summarize_forecast(FALLBACK_FORECAST)
        self.assertEqual(outlook.peak_day.date, "2025-04-19")
        self.assertEqual(outlook.peak_flood_risk, 8)
        self.assertEqual(outlook.peak_tier, RiskTier.HIGH)
        self.assertAlmostEqual(outlook.total_precipitation, 4.3)
        self.assertEqual(outlook.tier_counts[RiskTier.LOW], 2)
        self.assertEqual(outlook.tier_counts[RiskTier.MEDIUM], 2)
        self.assertEqual(outlook.tier_counts[RiskTier.HIGH], 1)

    def test_earliest_day_wins_ties(self):
        outlook = summarize_forecast([_day("2025-01-01", 0.1, 6), _day("2025-01-02", 0.2, 6)])
        self.assertEqual(outlook.peak_day.date, "2025-01-01")

    def test_empty_forecast(self):
        outlook = summarize_forecast([])
        self.assertIsNone(outlook.peak_day)
        self.assertIsNone(outlook.peak_flood_risk)
        self.assertEqual(outlook.peak_tier, RiskTier.LOW)
        self.assertEqual(outlook.total_precipitation, 0)


class TestEstimateFloodRisk(unittest.TestCase):
    def test_uses_three_day_horizon(self):
        # 0.25 + 0.75 + 2.1 = 3.1 inches -> 6 points
        self.assertEqual(estimate_flood_risk(0.0, FALLBACK_FORECAST), 6)

    def test_adds_recent_rainfall(self):
        self.assertEqual(estimate_flood_risk(1.0, FALLBACK_FORECAST), 8)

    def test_capped_at_ten(self):
        self.assertEqual(estimate_flood_risk(9.0, FALLBACK_FORECAST), 10)

    def test_never_negative(self):
        self.assertEqual(estimate_flood_risk(-5.0, []), 0)

    def test_rounds_half_up(self):
        # 1.25 inches -> 2.5 points -> 3
        self.assertEqual(estimate_flood_risk(1.25, []), 3)


class TestComposeRouteRisk(unittest.TestCase):
    def test_default_weights(self):
        factors = default_route_factors(8, 6, 4, current_conditions="Heavy Rain")
        self.assertEqual([f.weight for f in factors], [0.4, 0.3, 0.3])
        self.assertEqual(factors[0].description, "Heavy Rain")
        # 3.2 + 1.8 + 1.2 = 6.2
        self.assertEqual(compose_route_risk(factors), 6)

    def test_all_high(self):
        self.assertEqual(compose_route_risk(default_route_factors(10, 10, 10)), 10)

    def test_no_factors(self):
        self.assertEqual(compose_route_risk([]), 0)

    def test_custom_factor(self):
        factor = RiskFactor(name="Bridge closure", impact_level=9, weight=1.0)
        self.assertEqual(compose_route_risk([factor]), 9)


if __name__ == "__main__":
    unittest.main()
