"""Pydantic model for the simulation's global tuning configuration.

The payload is persisted as ``TMPE_GlobalConfig.xml``. Python attribute
names are snake_case; the PascalCase aliases are the element names used in
the XML document, so existing files written by older builds stay readable.

The lifecycle code never interprets the tuning fields. Only ``version`` is
inspected, to decide whether a persisted file predates the current schema.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

LATEST_VERSION = 1
"""Current schema version. Bump on any breaking change to the fields below."""

VERSION_CHECK_DISABLED = -1
"""Sentinel version: a file carrying it is always accepted as-is."""

DEBUG_SWITCH_COUNT = 6


class GlobalConfig(BaseModel):
    """Global tuning parameters read by the traffic simulation.

    Instances are replaced wholesale on reload and never mutated in place
    by the config service. Consumers should re-fetch the live instance
    instead of holding on to one across reloads.

    Examples:
        >>> config = GlobalConfig()
        >>> config.highway_lane_changing_base_cost
        0.25
        >>> config.model_dump(by_alias=True)["Version"]
        1
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        validate_default=True,
    )

    version: int = Field(
        default=LATEST_VERSION,
        description="Configuration schema version (-1 disables the version check)",
    )

    debug_switches: list[bool] = Field(
        default_factory=lambda: [False] * DEBUG_SWITCH_COUNT,
        description="Diagnostic toggles",
    )

    # Lane changing
    highway_lane_changing_base_cost: float = Field(
        default=0.25, description="Base lane changing cost factor on highways"
    )
    city_road_lane_changing_base_cost: float = Field(
        default=0.1, description="Base lane changing cost factor on city streets"
    )
    junction_lane_changing_base_cost: float = Field(
        default=1.5, description="Lane changing cost base before junctions"
    )
    congestion_lane_changing_base_cost: float = Field(
        default=2.5, description="Congestion lane changing base cost"
    )
    heavy_vehicle_lane_changing_cost_factor: float = Field(
        default=1.5, description="Heavy vehicle lane changing cost factor"
    )
    more_than_one_lane_changing_cost_factor: float = Field(
        default=2.5, description="Cost factor for changing more than one lane"
    )
    speed_to_density_balance: float = Field(
        default=0.75,
        description=(
            "Speed-to-density balance factor. "
            "1 = only speed is considered, "
            "0 = both speed and density are considered."
        ),
    )
    randomized_lane_changing_modulo: int = Field(
        default=250, description="Lane changing cost reduction modulo"
    )
    uturn_lane_distance: int = Field(
        default=2, description="Artificial lane distance for u-turns"
    )
    lane_density_rand_interval: float = Field(
        default=10.0, description="Lane density random interval"
    )
    lane_speed_rand_interval: float = Field(
        default=20.0, description="Lane speed random interval"
    )

    # Public transport and heavy vehicles
    public_transport_lane_penalty: float = Field(
        default=1.5, description="Penalty for buses not driving on bus lanes"
    )
    public_transport_lane_reward: float = Field(
        default=0.75,
        description="Reward for public transport staying on a transport lane",
    )
    heavy_vehicle_max_inner_lane_penalty: float = Field(
        default=25.0,
        description="Maximum penalty for heavy vehicles on an inner lane (in %)",
    )

    # Parking
    vicinity_parking_space_search_radius: float = Field(
        default=256.0,
        description="Parking space search radius; used if pocket car spawning is disabled",
    )
    vicinity_parking_space_selection_rand: int = Field(
        default=4,
        ge=0,
        description=(
            "Randomization of the vicinity parking space choice. "
            "A value of N selects the nearest space with (N-1)/N chance. "
            "1 always selects the nearest space."
        ),
    )
    max_parking_attempts: int = Field(
        default=10, description="Maximum number of parking attempts for passenger cars"
    )
    min_parked_car_to_target_building_distance: float = Field(
        default=256.0,
        description="Minimum distance between target building and parked car for using a car",
    )
    max_parked_car_instance_switch_distance: float = Field(
        default=6.0,
        description=(
            "Maximum distance between citizen and parked vehicle before "
            "the parked car is turned into a vehicle"
        ),
    )
    max_building_to_pedestrian_lane_distance: float = Field(
        default=64.0, description="Maximum distance between building and pedestrian lane"
    )
    max_parked_car_distance_to_home: float = Field(
        default=768.0,
        description="Maximum distance between home and parked car when travelling home",
    )

    # Priority signs
    max_priority_check_sqr_dist: float = Field(
        default=225.0,
        description="Maximum incoming vehicle square distance to junction for priority signs",
    )
    max_priority_approach_time: float = Field(
        default=10.0, description="Maximum junction approach time for priority signs"
    )

    # Speed and congestion
    min_speed_update_factor: float = Field(
        default=0.05, description="Minimum speed update factor"
    )
    max_speed_update_factor: float = Field(
        default=0.25, description="Maximum speed update factor"
    )
    lower_speed_congestion_threshold: int = Field(
        default=6000, description="Lower congestion threshold (per ten-thousands)"
    )
    upper_speed_congestion_threshold: int = Field(
        default=7000, description="Upper congestion threshold (per ten-thousands)"
    )

    # Demand
    public_transport_demand_increment: int = Field(
        default=10, ge=0, description="Public transport demand increment on path-find failure"
    )
    public_transport_demand_decrement: int = Field(
        default=1, ge=0, description="Public transport demand decrement on simulation step"
    )
    public_transport_demand_usage_decrement: int = Field(
        default=5, ge=0, description="Public transport demand decrement on path-find success"
    )
    parking_space_demand_decrement: int = Field(
        default=1, ge=0, description="Parking space demand decrement on simulation step"
    )
    min_spawned_car_parking_space_demand_delta: int = Field(
        default=-5,
        description="Minimum parking space demand delta when a passenger car could be spawned",
    )
    max_spawned_car_parking_space_demand_delta: int = Field(
        default=3,
        description="Maximum parking space demand delta when a passenger car could be spawned",
    )
    min_found_park_pos_parking_space_demand_delta: int = Field(
        default=-5,
        description="Minimum parking space demand delta when a parking spot could be found",
    )
    max_found_park_pos_parking_space_demand_delta: int = Field(
        default=3,
        description="Maximum parking space demand delta when a parking spot could be found",
    )
    failed_parking_space_demand_increment: int = Field(
        default=10,
        ge=0,
        description="Parking space demand increment when no spot was found while parking",
    )
    failed_spawn_parking_space_demand_increment: int = Field(
        default=20,
        ge=0,
        description="Parking space demand increment when no spot was found while spawning",
    )
    max_speed_difference: int = Field(
        default=1250,
        ge=0,
        description="Maximum reported speed difference among lanes of one segment (in 10000ths)",
    )
