"""Game rules for a cooperative zombie shooter: state machines, match flow, safe zones, HUD text and weapons."""

__version__ = "0.1.0"
__all__ = ["defines", "events", "game", "hud", "statemachine", "text", "weapons"]