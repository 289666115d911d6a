"""Errors raised by chat_rgb."""


class InvalidColorFormat(ValueError):
    """A color string is not `#RRGGBB` or a known palette color name."""


class UnknownActionKind(ValueError):
    """A click or hover event names an action that does not exist."""
