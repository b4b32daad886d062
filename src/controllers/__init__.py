"""Controllers package for the Trello sessions service."""

from src.controllers.fan_out import run_bounded

__all__ = [
    "run_bounded",
]
