# Utils package (codec, frame clock)

from src.tmpe.utils.frame_clock import (
    DEFAULT_EPOCH_SHIFT,
    FrameCounter,
    FrameSource,
    get_frame_counter,
)
from src.tmpe.utils.global_config_codec import (
    decode_global_config,
    encode_global_config,
)

__all__ = [
    "DEFAULT_EPOCH_SHIFT",
    "FrameCounter",
    "FrameSource",
    "decode_global_config",
    "encode_global_config",
    "get_frame_counter",
]
