"""Game package: re-export the runner's public pieces.

    from game import GameSession, build_controller
"""

from .session import GameSession
from .persistence import HighScoreStore, MemoryHighScoreStore
from .assets import GameAssets
from .background import BackgroundLooper
from .spawner import Spawner
from .judge import ScoringJudge
from .cleaner import LifecycleCleaner
from .scenes import StartScene, GameScene, GameOverScene
from .controller import SceneController, build_controller

__all__ = [
    "GameSession",
    "HighScoreStore",
    "MemoryHighScoreStore",
    "GameAssets",
    "BackgroundLooper",
    "Spawner",
    "ScoringJudge",
    "LifecycleCleaner",
    "StartScene",
    "GameScene",
    "GameOverScene",
    "SceneController",
    "build_controller",
]
