"""Game logic for dyeing and clearing targets: signals, materials, physics, targets, game mode and UI state."""

__version__ = "0.1.0"