"""
Melinjo Run: a side-scrolling arcade game about jumping, flying and collecting melinjos.
"""

from .config import GameConfig
from .data_models import EndReason, GameStatus
from .game_engine import GameEngine

__all__ = ["GameConfig", "GameEngine", "GameStatus", "EndReason"]
__version__ = "0.1.0"
