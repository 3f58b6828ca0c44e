"""Map 0-10 risk scores onto tiers, rendering colors and recommendations.

Every screen that needs a color or a recommendation goes through this module,
so the tier boundaries and the color table live in exactly one place.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from route_risk.domain import RiskAssessment, RiskTier

HIGH_RISK_THRESHOLD = 7
MEDIUM_RISK_THRESHOLD = 4

# Lower bounds checked high-to-low; first match wins.
_TIER_THRESHOLDS: Tuple[Tuple[int, RiskTier], ...] = (
    (HIGH_RISK_THRESHOLD, RiskTier.HIGH),
    (MEDIUM_RISK_THRESHOLD, RiskTier.MEDIUM),
)

TIER_COLORS: Dict[RiskTier, str] = {
    RiskTier.HIGH: "#F44336",
    RiskTier.MEDIUM: "#FF9800",
    RiskTier.LOW: "#4CAF50",
}

TIER_RECOMMENDATIONS: Dict[RiskTier, str] = {
    RiskTier.HIGH: "Consider increasing inventory orders by 25% to account for potential delivery delays.",
    RiskTier.MEDIUM: "Monitor weather conditions closely. Consider a backup delivery route.",
    RiskTier.LOW: "No action needed. Route appears stable.",
}


def tier_for(risk: int) -> RiskTier:
    """Return the tier for a risk score; scores outside 0-10 follow the same rule."""
    for lower_bound, tier in _TIER_THRESHOLDS:
        if risk >= lower_bound:
            return tier
    return RiskTier.LOW


def color_for(tier: RiskTier) -> str:
    return TIER_COLORS[tier]


def recommendation_for(tier: RiskTier) -> str:
    return TIER_RECOMMENDATIONS[tier]


def classify(risk: int) -> RiskAssessment:
    """Classify a route risk level or forecast flood risk."""
    tier = tier_for(risk)
    return RiskAssessment(
        risk_level=risk,
        tier=tier,
        color=color_for(tier),
        recommendation=recommendation_for(tier),
    )


def legend() -> List[dict]:
    """Tier legend for map views, ordered from lowest to highest risk."""
    return [
        {"tier": tier.value, "color": TIER_COLORS[tier]}
        for tier in (RiskTier.LOW, RiskTier.MEDIUM, RiskTier.HIGH)
    ]
