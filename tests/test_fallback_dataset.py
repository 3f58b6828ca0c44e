import unittest

from pydantic import ValidationError

from route_risk.data_sources.fallback import FALLBACK_DATASET, FallbackDataset
from route_risk.domain import Coordinate, RiskTier, Route
from route_risk.risk import tier_for


class TestFallbackDataset(unittest.TestCase):
    def test_catalog_spans_every_tier(self):
        tiers = {tier_for(route.risk_level) for route in FALLBACK_DATASET.routes}
        self.assertEqual(tiers, {RiskTier.LOW, RiskTier.MEDIUM, RiskTier.HIGH})

    def test_catalog_order_and_ids(self):
        self.assertEqual([r.id for r in FALLBACK_DATASET.list_routes()], ["route1", "route2", "route3"])

    def test_find_route(self):
        route = FALLBACK_DATASET.find_route("route3")
        self.assertIsNotNone(route)
        self.assertEqual(route.risk_level, 8)
        self.assertEqual(route.name, "South Seattle to Bellevue")

    def test_find_unknown_route(self):
        self.assertIsNone(FALLBACK_DATASET.find_route("nonexistent"))

    def test_route_start_and_end(self):
        route = FALLBACK_DATASET.find_route("route1")
        self.assertEqual(route.start, Coordinate(latitude=47.6062, longitude=-122.3321))
        self.assertEqual(route.end, Coordinate(latitude=47.6231, longitude=-122.3142))

    def test_forecast_has_five_days_in_order(self):
        dates = [day.date for day in FALLBACK_DATASET.forecast]
        self.assertEqual(len(dates), 5)
        self.assertEqual(dates, sorted(dates))
        self.assertEqual([d.flood_risk for d in FALLBACK_DATASET.forecast], [2, 5, 8, 6, 3])

    def test_forecast_for_truncates(self):
        self.assertEqual(len(FALLBACK_DATASET.forecast_for(3)), 3)
        self.assertEqual(len(FALLBACK_DATASET.forecast_for(10)), 5)
        self.assertEqual(FALLBACK_DATASET.forecast_for(0), [])

    def test_entries_are_immutable(self):
        route = FALLBACK_DATASET.find_route("route2")
        with self.assertRaises(ValidationError):
            route.risk_level = 0
        with self.assertRaises(AttributeError):
            FALLBACK_DATASET.routes = ()

    def test_list_routes_returns_a_copy(self):
        routes = FALLBACK_DATASET.list_routes()
        routes.clear()
        self.assertEqual(len(FALLBACK_DATASET.routes), 3)

    def test_custom_dataset(self):
        route = Route(
            id="only",
            name="Only route",
            risk_level=1,
            coordinates=(Coordinate(latitude=0, longitude=0), Coordinate(latitude=1, longitude=1)),
            estimated_delivery_time=5,
            distance=1.0,
        )
        dataset = FallbackDataset(routes=(route,), forecast=())
        self.assertIs(dataset.find_route("only"), route)
        self.assertEqual(dataset.forecast_for(5), [])


if __name__ == "__main__":
    unittest.main()
