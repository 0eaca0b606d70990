"""Lab-assistant chat bot: prompt modes, bounded conversation sessions and a chat completion boundary."""

__version__ = "0.1.0"
