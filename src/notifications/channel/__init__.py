"""Channel adapter registry — where rendered notices are written.

Provides singleton access to channel adapters. The stdout adapter is used by
default; set ``OUTPUT_CHANNEL=fake`` to record output in memory instead.
"""

from notifications.notice import OutputChannel

_channel_instances: dict[str, object] = {}


def get_channel(channel_type: str | None = None):
    """Return the configured channel adapter (singleton per channel type).

    Args:
        channel_type: One of OutputChannel enum values ("stdout", "fake").
            Defaults to the ``OUTPUT_CHANNEL`` setting.
    """
    if channel_type is None:
        from shared.config import get_settings

        channel_type = get_settings().output_channel

    if channel_type not in _channel_instances:
        if channel_type == OutputChannel.STDOUT.value:
            from notifications.channel.stdout_adapter import StdoutAdapter

            _channel_instances[channel_type] = StdoutAdapter()
        elif channel_type == OutputChannel.FAKE.value:
            from notifications.channel.fake_output import FakeOutputAdapter

            _channel_instances[channel_type] = FakeOutputAdapter()
        else:
            raise ValueError(f"Unknown channel type: {channel_type}")

    return _channel_instances[channel_type]


def reset_channels():
    """Reset all channel singletons (useful for testing)."""
    global _channel_instances
    _channel_instances.clear()
