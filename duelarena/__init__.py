"""Turn-based two-player duel games for the terminal: a hero duel and an elemental duel."""

__version__ = "0.1.0"
__all__ = ["__version__"]