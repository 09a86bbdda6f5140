"""Neon Snake: tick-driven snake game core."""

from neon_snake.config import GameConfig, Palette
from neon_snake.controller import GameController
from neon_snake.engine import (
    DeathCause,
    EventKind,
    GameEngine,
    GameEvent,
    RunState,
    TickResult,
)
from neon_snake.grid import Grid, GridDimensions, grid_for_viewport
from neon_snake.input_buffer import InputBuffer
from neon_snake.particles import Particle, ParticleSystem
from neon_snake.scoring import JsonFileStore, MemoryStore, ScoreBoard
from neon_snake.snake import Direction, Snake

__all__ = [
    "DeathCause",
    "Direction",
    "EventKind",
    "GameConfig",
    "GameController",
    "GameEngine",
    "GameEvent",
    "Grid",
    "GridDimensions",
    "InputBuffer",
    "JsonFileStore",
    "MemoryStore",
    "Palette",
    "Particle",
    "ParticleSystem",
    "RunState",
    "ScoreBoard",
    "Snake",
    "TickResult",
    "grid_for_viewport",
]
