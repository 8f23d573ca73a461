"""Tests for the GlobalConfig domain model."""

import pytest
from pydantic import ValidationError

from src.tmpe.domain.global_config import (
    DEBUG_SWITCH_COUNT,
    LATEST_VERSION,
    VERSION_CHECK_DISABLED,
    GlobalConfig,
)


class TestGlobalConfigDefaults:
    """Tests for GlobalConfig default values."""

    def test_default_version_is_latest(self) -> None:
        """A fresh config carries the current schema version."""
        assert GlobalConfig().version == LATEST_VERSION == 1

    def test_default_debug_switches(self) -> None:
        """All debug switches are off by default."""
        config = GlobalConfig()
        assert config.debug_switches == [False] * DEBUG_SWITCH_COUNT

    def test_debug_switches_not_shared(self) -> None:
        """Each instance gets its own debug switch list."""
        a = GlobalConfig()
        b = GlobalConfig()
        assert a.debug_switches is not b.debug_switches

    def test_lane_changing_defaults(self) -> None:
        """Lane changing costs match the documented defaults."""
        config = GlobalConfig()
        assert config.highway_lane_changing_base_cost == 0.25
        assert config.city_road_lane_changing_base_cost == 0.1
        assert config.junction_lane_changing_base_cost == 1.5
        assert config.congestion_lane_changing_base_cost == 2.5
        assert config.randomized_lane_changing_modulo == 250

    def test_parking_and_demand_defaults(self) -> None:
        """Parking and demand parameters match the documented defaults."""
        config = GlobalConfig()
        assert config.vicinity_parking_space_selection_rand == 4
        assert config.max_parking_attempts == 10
        assert config.max_parked_car_distance_to_home == 768.0
        assert config.min_spawned_car_parking_space_demand_delta == -5
        assert config.failed_spawn_parking_space_demand_increment == 20
        assert config.max_speed_difference == 1250

    def test_congestion_thresholds(self) -> None:
        """Congestion thresholds are given in ten-thousandths."""
        config = GlobalConfig()
        assert config.lower_speed_congestion_threshold == 6000
        assert config.upper_speed_congestion_threshold == 7000


class TestGlobalConfigAliases:
    """Tests for the PascalCase aliases used as XML element names."""

    def test_dump_by_alias(self) -> None:
        """Dumping by alias yields the persisted element names."""
        data = GlobalConfig().model_dump(by_alias=True)
        assert data["Version"] == LATEST_VERSION
        assert data["HighwayLaneChangingBaseCost"] == 0.25
        assert data["UturnLaneDistance"] == 2
        assert data["MaxPriorityCheckSqrDist"] == 225.0
        assert data["DebugSwitches"] == [False] * DEBUG_SWITCH_COUNT

    def test_validate_from_aliases(self) -> None:
        """Alias keys populate the snake_case attributes."""
        config = GlobalConfig.model_validate(
            {"Version": 1, "HighwayLaneChangingBaseCost": 0.5}
        )
        assert config.highway_lane_changing_base_cost == 0.5

    def test_construct_by_field_name(self) -> None:
        """Field names are accepted as well as aliases."""
        config = GlobalConfig(version=0, max_parking_attempts=3)
        assert config.version == 0
        assert config.max_parking_attempts == 3

    def test_every_field_has_alias(self) -> None:
        """Every field maps to a distinct PascalCase element name."""
        aliases = [f.alias for f in GlobalConfig.model_fields.values()]
        assert all(alias and alias[0].isupper() and "_" not in alias for alias in aliases)
        assert len(set(aliases)) == len(aliases)


class TestGlobalConfigValidation:
    """Tests for field validation."""

    def test_unsigned_fields_reject_negative(self) -> None:
        """Fields that were unsigned in the file format reject negatives."""
        with pytest.raises(ValidationError):
            GlobalConfig(max_speed_difference=-1)
        with pytest.raises(ValidationError):
            GlobalConfig(public_transport_demand_increment=-10)

    def test_signed_delta_fields_accept_negative(self) -> None:
        """Demand delta fields may be negative."""
        config = GlobalConfig(min_found_park_pos_parking_space_demand_delta=-20)
        assert config.min_found_park_pos_parking_space_demand_delta == -20

    def test_version_sentinel_accepted(self) -> None:
        """The version-check-disabled sentinel is a valid version."""
        config = GlobalConfig(version=VERSION_CHECK_DISABLED)
        assert config.version == -1

    def test_lax_string_values(self) -> None:
        """String values from the XML document are coerced."""
        config = GlobalConfig.model_validate(
            {
                "Version": "1",
                "SpeedToDensityBalance": "0.5",
                "DebugSwitches": ["true", "false"],
            }
        )
        assert config.version == 1
        assert config.speed_to_density_balance == 0.5
        assert config.debug_switches == [True, False]
