"""A terminal text adventure: commands, keyword classification of actions, and simple combat."""

__version__ = "0.1.0"
__all__ = ["__version__"]