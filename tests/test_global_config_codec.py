"""Tests for the global config XML codec."""

import xml.etree.ElementTree as ET

import pytest

from src.tmpe.domain.errors import ConfigDecodeError
from src.tmpe.domain.global_config import LATEST_VERSION, GlobalConfig
from src.tmpe.utils.global_config_codec import (
    NAMESPACE,
    decode_global_config,
    encode_global_config,
)

NS = f"{{{NAMESPACE}}}"


def _document(body: str) -> bytes:
    """Wrap element text in a GlobalConfig root with the TMPE namespace."""
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        f'<GlobalConfig xmlns="{NAMESPACE}">{body}</GlobalConfig>'
    ).encode("utf-8")


class TestEncodeGlobalConfig:
    """Tests for encode_global_config."""

    def test_starts_with_xml_declaration(self) -> None:
        """Output carries an XML declaration."""
        data = encode_global_config(GlobalConfig())
        assert data.startswith(b"<?xml")

    def test_root_element_and_namespace(self) -> None:
        """Root element is GlobalConfig in the TMPE namespace."""
        root = ET.fromstring(encode_global_config(GlobalConfig()))
        assert root.tag == f"{NS}GlobalConfig"
        assert b'xmlns="http://www.viathinksoft.de/tmpe"' in encode_global_config(
            GlobalConfig()
        )

    def test_one_element_per_field(self) -> None:
        """Every model field is written as a child element."""
        root = ET.fromstring(encode_global_config(GlobalConfig()))
        tags = [child.tag.removeprefix(NS) for child in root]
        expected = [f.alias for f in GlobalConfig.model_fields.values()]
        assert tags == expected

    def test_scalar_values(self) -> None:
        """Scalars are written as element text."""
        root = ET.fromstring(encode_global_config(GlobalConfig(max_parking_attempts=7)))
        assert root.find(f"{NS}Version").text == str(LATEST_VERSION)
        assert root.find(f"{NS}HighwayLaneChangingBaseCost").text == "0.25"
        assert root.find(f"{NS}MaxParkingAttempts").text == "7"

    def test_bool_list_items(self) -> None:
        """Bool lists become <boolean> children with lowercase values."""
        config = GlobalConfig(debug_switches=[True, False, True])
        root = ET.fromstring(encode_global_config(config))
        items = root.find(f"{NS}DebugSwitches")
        assert [item.tag for item in items] == [f"{NS}boolean"] * 3
        assert [item.text for item in items] == ["true", "false", "true"]

    def test_output_is_indented(self) -> None:
        """Each field sits on its own line."""
        text = encode_global_config(GlobalConfig()).decode("utf-8")
        assert "\n  <Version>1</Version>\n" in text


class TestDecodeGlobalConfig:
    """Tests for decode_global_config."""

    def test_round_trip_defaults(self) -> None:
        """Decoding an encoded default config yields the defaults."""
        assert decode_global_config(encode_global_config(GlobalConfig())) == GlobalConfig()

    def test_round_trip_custom_values(self) -> None:
        """Custom values survive an encode/decode cycle."""
        config = GlobalConfig(
            version=-1,
            debug_switches=[True] * 6,
            city_road_lane_changing_base_cost=0.1 + 0.2,
            min_spawned_car_parking_space_demand_delta=-12,
        )
        assert decode_global_config(encode_global_config(config)) == config

    def test_missing_fields_use_defaults(self) -> None:
        """Fields absent from the document keep their defaults."""
        config = decode_global_config(
            _document("<Version>1</Version><MaxParkingAttempts>3</MaxParkingAttempts>")
        )
        assert config.max_parking_attempts == 3
        assert config.highway_lane_changing_base_cost == 0.25

    def test_missing_version_defaults_to_latest(self) -> None:
        """A document without Version is treated as current."""
        config = decode_global_config(_document(""))
        assert config.version == LATEST_VERSION

    def test_unknown_elements_ignored(self) -> None:
        """Elements from removed or future fields are skipped."""
        config = decode_global_config(
            _document("<Version>1</Version><SomeRetiredSetting>42</SomeRetiredSetting>")
        )
        assert config == GlobalConfig()

    def test_empty_list_element(self) -> None:
        """A self-closing list element decodes to an empty list."""
        config = decode_global_config(_document("<DebugSwitches />"))
        assert config.debug_switches == []

    def test_whitespace_around_values(self) -> None:
        """Surrounding whitespace in element text is ignored."""
        config = decode_global_config(
            _document("<Version>\n  0\n</Version>"
                      "<DebugSwitches><boolean> true </boolean></DebugSwitches>")
        )
        assert config.version == 0
        assert config.debug_switches == [True]

    def test_malformed_xml(self) -> None:
        """Documents that are not well-formed raise ConfigDecodeError."""
        with pytest.raises(ConfigDecodeError, match="Malformed"):
            decode_global_config(b"<GlobalConfig><Version>1</Version>")

    def test_empty_content(self) -> None:
        """Empty files raise ConfigDecodeError."""
        with pytest.raises(ConfigDecodeError):
            decode_global_config(b"")

    def test_wrong_root_element(self) -> None:
        """A different root element raises ConfigDecodeError."""
        data = f'<Settings xmlns="{NAMESPACE}"><Version>1</Version></Settings>'.encode()
        with pytest.raises(ConfigDecodeError, match="Unexpected root element"):
            decode_global_config(data)

    def test_root_without_namespace(self) -> None:
        """The root element must be in the TMPE namespace."""
        with pytest.raises(ConfigDecodeError, match="Unexpected root element"):
            decode_global_config(b"<GlobalConfig><Version>1</Version></GlobalConfig>")

    def test_invalid_value(self) -> None:
        """Values that fail validation raise ConfigDecodeError."""
        with pytest.raises(ConfigDecodeError, match="Invalid global config values"):
            decode_global_config(_document("<Version>one</Version>"))

    def test_negative_unsigned_value(self) -> None:
        """Negative values in unsigned fields raise ConfigDecodeError."""
        with pytest.raises(ConfigDecodeError):
            decode_global_config(_document("<MaxSpeedDifference>-1</MaxSpeedDifference>"))
