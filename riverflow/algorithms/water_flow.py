"""Mid-section (velocity-area) water flow."""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict

from riverflow.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from riverflow.config import CrossSection

LOG = logging.getLogger(__name__)


class Measurement(BaseModel):
    """Depth and velocity measured at one point of a cross-section.

    Attributes:
        id: Identifier of the measurement, used in diagnostic messages.
        depth: Stream depth at the point, in meters.
        velocity: Stream velocity at the point, in meters per second.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    depth: float
    velocity: float


def _validate_input(
    width: float, measurements: Sequence[Measurement | None] | None
) -> None:
    if width <= 0:
        raise InvalidArgumentError(
            "The width of the stream must be greater than zero."
        )

    if measurements is None or len(measurements) < 2:
        raise InvalidArgumentError("At least two measurements are required.")

    if any(m is None for m in measurements):
        raise InvalidArgumentError("Measurement cannot be null.")

    # First and last by position in the sequence, not by id value
    first_id = measurements[0].id
    last_id = measurements[-1].id

    for m in measurements:
        if m.depth < 0:
            raise InvalidArgumentError(
                f"Measurement #{m.id}: Stream depth cannot be negative."
            )

        if m.velocity < 0:
            raise InvalidArgumentError(
                f"Measurement #{m.id}: Velocity cannot be negative."
            )

        if m.depth == 0:
            if m.id != first_id and m.id != last_id:
                raise InvalidArgumentError(
                    f"Measurement #{m.id}: only first and last measurements "
                    "can contain zero stream depth."
                )

            if m.velocity != 0:
                raise InvalidArgumentError(
                    f"Measurement #{m.id}: Velocity cannot be other than "
                    "zero if depth is zero."
                )

        if m.depth != 0 and m.velocity == 0:
            raise InvalidArgumentError(
                f"Measurement #{m.id}: Velocity cannot be zero when depth "
                "is more than zero."
            )


class FlowCalculator:
    """Volume of water moving through a cross-section of a stream."""

    def __init__(
        self,
        width: float,
        measurements: Sequence[Measurement | None] | None,
    ):
        """Validate the cross-section.

        Args:
            width: Width of the stream (meters).
            measurements: Depth and velocity measurements, ordered from one
                bank to the other.

        Raises:
            InvalidArgumentError: If the width is not positive, if there are
                less than two measurements or if a measurement is not valid.
        """
        _validate_input(width, measurements)

        self._width = float(width)
        self._measurements: tuple[Measurement, ...] = tuple(measurements)

    @classmethod
    def from_config(cls, cross_section: "CrossSection") -> "FlowCalculator":
        """Create a calculator from a cross-section configuration."""
        return cls(cross_section.width, cross_section.measurements)

    @property
    def width(self) -> float:
        """Width of the stream (meters)."""
        return self._width

    @property
    def measurements(self) -> tuple[Measurement, ...]:
        """Measurements in cross-section order."""
        return self._measurements

    def section_flows(self) -> NDArray[np.float64]:
        """Compute the flow of every section between adjacent measurements.

        Returns:
            NDArray: Array (N-1,) of section flows (m^3/s).
        """
        depths = np.array(
            [m.depth for m in self._measurements], dtype=np.float64
        )
        vels = np.array(
            [m.velocity for m in self._measurements], dtype=np.float64
        )
        section_width = self._width / (len(self._measurements) - 1)

        section_depths = (depths[:-1] + depths[1:]) / 2
        section_areas = section_width * section_depths
        section_vels = (vels[:-1] + vels[1:]) / 2
        return section_areas * section_vels

    def compute_flow(self) -> float:
        """Compute the water flow using the mid-section method.

        Section flows are accumulated in cross-section order; np.sum would
        change the rounding.

        Returns:
            float: Water flow (m^3/s).
        """
        total_flow = 0.0
        for section_flow in self.section_flows():
            total_flow += float(section_flow)

        LOG.debug(
            "Water flow %s m^3/s over %d sections",
            total_flow,
            len(self._measurements) - 1,
        )
        return total_flow


def get_mid_section_water_flow(
    width: float,
    measurements: Sequence[Measurement | None] | None,
) -> float:
    """Compute the water flow of a cross-section.

    Args:
        width: Width of the stream (meters).
        measurements: Depth and velocity measurements across the stream.

    Returns:
        float: Water flow (m^3/s).
    """
    return FlowCalculator(width, measurements).compute_flow()
