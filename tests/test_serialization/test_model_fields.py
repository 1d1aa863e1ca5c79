"""Tests for using families as pydantic model fields."""

import pytest
from pydantic import BaseModel, Field, ValidationError

from families import Color, Direction


class Tile(BaseModel):
    """Model with enumeration fields."""
    color: Color
    heading: Direction = Field(default=Direction.NORTH)
    palette: list[Color] = Field(default_factory=list)


class TestValidation:
    """Tests for parsing into members."""

    def test_from_label(self):
        """Labels become members."""
        tile = Tile(color="red", heading="W")
        assert tile.color is Color.RED
        assert tile.heading is Direction.WEST

    def test_from_member(self):
        """Members pass through unchanged."""
        tile = Tile(color=Color.BLUE)
        assert tile.color is Color.BLUE

    def test_default(self):
        """Defaults are members."""
        assert Tile(color="red").heading is Direction.NORTH

    def test_list_field(self):
        """Lists of labels become lists of members."""
        tile = Tile(color="red", palette=["green", "blue"])
        assert tile.palette == [Color.GREEN, Color.BLUE]

    def test_unknown_label(self):
        """Unknown labels surface as ValidationError with the message."""
        with pytest.raises(ValidationError) as exc:
            Tile(color="purple")
        assert "Value 'purple' is not a valid Color enumeration value." in str(exc.value)

    def test_wrong_family_label(self):
        """Labels of another family are rejected."""
        with pytest.raises(ValidationError):
            Tile(color="N")


class TestSerialization:
    """Tests for dumping members."""

    def test_model_dump(self):
        """Members dump as labels."""
        tile = Tile(color="green", palette=["red"])
        assert tile.model_dump() == {
            "color": "green",
            "heading": "N",
            "palette": ["red"],
        }

    def test_json_round_trip(self):
        """JSON round trip restores the singletons."""
        tile = Tile(color="blue", heading="S", palette=["red", "green"])
        restored = Tile.model_validate_json(tile.model_dump_json())
        assert restored.color is Color.BLUE
        assert restored.heading is Direction.SOUTH
        assert restored.palette[1] is Color.GREEN

    def test_json_schema(self):
        """Schema lists the labels."""
        class Swatch(BaseModel):
            color: Color

        schema = Swatch.model_json_schema()
        color = schema["properties"]["color"]
        assert color["type"] == "string"
        assert color["enum"] == ["red", "green", "blue"]
