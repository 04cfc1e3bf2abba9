"""Feature flags – sample flag definitions.

A starting registry for new applications; replace or extend it with your
own flags.
"""
from __future__ import annotations

from mp_flags.feature_flags.definition import FlagDefinition, RolloutRule
from mp_flags.feature_flags.registry import FlagRegistry


def default_flag_definitions() -> FlagRegistry:
    return FlagRegistry({
        "newDashboard": FlagDefinition(
            default_value=False,
            description="Enable the redesigned dashboard UI",
            rollout=RolloutRule(percentage=0),
            environments={"development": True},
        ),
        "betaFeatures": FlagDefinition(
            default_value=False,
            description="Enable access to beta features",
            rollout=RolloutRule(percentage=0),
        ),
        "enhancedAnalytics": FlagDefinition(
            default_value=False,
            description="Enable enhanced analytics tracking",
            environments={"production": False, "staging": True, "development": True},
        ),
        "maintenanceMode": FlagDefinition(
            default_value=False,
            description="Show maintenance mode banner",
        ),
        "debugMode": FlagDefinition(
            default_value=False,
            description="Enable debug mode with additional logging",
            environments={"development": True},
        ),
    })


__all__ = ["default_flag_definitions"]
