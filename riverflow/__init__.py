"""River flow through a cross-section using the mid-section method."""

from riverflow.algorithms.water_flow import (
    FlowCalculator,
    Measurement,
    get_mid_section_water_flow,
)
from riverflow.config import CrossSection
from riverflow.exceptions import InvalidArgumentError

__all__ = [
    "CrossSection",
    "FlowCalculator",
    "InvalidArgumentError",
    "Measurement",
    "get_mid_section_water_flow",
]
