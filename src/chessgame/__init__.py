"""chessgame: chess rules core, computer adversary and game controller."""

__version__ = "0.1.0"
