"""Platform sinks: the device capabilities the player drives.

- HapticSink: protocol every sink implements
- ChannelSink: native bridge over a MethodChannel, with retry
- RecordingSink: in-memory sink for simulation and tests
- NullSink: device without haptics
"""

from haptic_composer.core.sinks.channel import (
    ChannelSink,
    MethodChannel,
    MissingPluginError,
    PlatformCallError,
)
from haptic_composer.core.sinks.null import NullSink
from haptic_composer.core.sinks.protocols import HapticSink
from haptic_composer.core.sinks.recording import RecordingSink, TriggerCall

__all__ = [
    "HapticSink",
    "ChannelSink",
    "MethodChannel",
    "MissingPluginError",
    "PlatformCallError",
    "NullSink",
    "RecordingSink",
    "TriggerCall",
]
