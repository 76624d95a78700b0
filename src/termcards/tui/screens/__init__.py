"""TUI screens for termcards."""

from .browse import BrowseScreen
from .main_menu import MainMenuScreen
from .statistics import StatisticsScreen

__all__ = ["BrowseScreen", "MainMenuScreen", "StatisticsScreen"]
