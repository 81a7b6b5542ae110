"""
Logic module for TicTacToe.
Handles game state, rules, win detection and time-travel.
"""

from .board import Player, Board, WinResult, GameStatus, GameStatusKind
from .config import GameConfig
from .errors import GameError, InvalidGridSize, InvalidIndex
from .game_state import GameState, GameStateSnapshot, ScoreTally
from .move_validator import MoveValidator
from .win_checker import WinChecker, generate_winning_lines
