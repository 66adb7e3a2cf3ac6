"""Configuration."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

from riverflow.algorithms.water_flow import FlowCalculator, Measurement

LOG = logging.getLogger(__name__)


class CrossSection(BaseModel):
    """Configuration of a measured cross-section."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    width: float
    measurements: tuple[Measurement, ...]

    def to_calculator(self) -> FlowCalculator:
        """Validate the cross-section and return its flow calculator."""
        return FlowCalculator.from_config(self)

    @staticmethod
    def from_mapping(data: Any, section_id: str | None = None):
        """Load config from an already parsed document.

        Args:
            data: Parsed document, e.g. the result of json.load.
            section_id: Key of the cross-section when the document maps
                ids to cross-sections.

        Raises:
            KeyError: If section_id is not in the document.
            pydantic.ValidationError: If the cross-section is malformed.
        """
        if section_id is None:
            return CrossSection.model_validate(data)
        if not isinstance(data, Mapping) or section_id not in data:
            raise KeyError(f"Cross-section {section_id!r} not found.")
        LOG.debug("Loading cross-section %s", section_id)
        return CrossSection.model_validate(data[section_id])
