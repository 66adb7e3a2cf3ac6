import pytest
from pydantic import ValidationError

from riverflow.algorithms.water_flow import FlowCalculator, Measurement
from riverflow.config import CrossSection
from riverflow.exceptions import InvalidArgumentError

RECTANGLE = {
    "name": "rectangle",
    "width": 3,
    "measurements": [
        {"id": 0, "depth": 0, "velocity": 0},
        {"id": 1, "depth": 1, "velocity": 3},
        {"id": 2, "depth": 1, "velocity": 3},
        {"id": 3, "depth": 0, "velocity": 0},
    ],
}


class TestCrossSection:
    """Test the CrossSection configuration."""

    def test_from_mapping(self) -> None:
        """Test loading a cross-section from a parsed document."""
        section = CrossSection.from_mapping(RECTANGLE)
        assert section.name == "rectangle"
        assert section.width == 3.0
        assert [m.id for m in section.measurements] == [0, 1, 2, 3]
        assert section.to_calculator().compute_flow() == 4.5

    def test_from_mapping_section_id(self) -> None:
        """Test loading one cross-section of a mapping of sections."""
        section = CrossSection.from_mapping(
            {"upstream": RECTANGLE}, section_id="upstream"
        )
        assert section.to_calculator().compute_flow() == 4.5

    @pytest.mark.parametrize(
        ("data", "section_id"),
        [({}, "x"), ({"upstream": RECTANGLE}, "x"), (None, "x")],
    )
    def test_missing_section(self, data: dict | None, section_id: str) -> None:
        """Test that an unknown section id is a key error."""
        with pytest.raises(KeyError, match="Cross-section 'x' not found."):
            CrossSection.from_mapping(data, section_id=section_id)

    @pytest.mark.parametrize(
        "data",
        [None, [], "rectangle", {"width": 3}],
    )
    def test_malformed_document(self, data: object) -> None:
        """Test that a malformed document is a validation error."""
        with pytest.raises(ValidationError):
            CrossSection.from_mapping(data)

    def test_to_calculator(self) -> None:
        """Test that the calculator keeps width and measurements."""
        section = CrossSection.from_mapping(RECTANGLE)
        calculator = section.to_calculator()
        assert isinstance(calculator, FlowCalculator)
        assert calculator.width == section.width
        assert calculator.measurements == section.measurements

    def test_frozen(self) -> None:
        """Test that a cross-section cannot be modified."""
        section = CrossSection.from_mapping(RECTANGLE)
        assert isinstance(section.measurements, tuple)
        with pytest.raises(ValidationError):
            section.measurements = (  # type: ignore[misc]
                Measurement(id=0, depth=1.0, velocity=1.0),
            )

    def test_invalid_section(self) -> None:
        """Test that semantic errors surface when building the calculator."""
        section = CrossSection.from_mapping({**RECTANGLE, "width": 0})
        with pytest.raises(
            InvalidArgumentError,
            match="The width of the stream must be greater than zero.",
        ):
            section.to_calculator()
