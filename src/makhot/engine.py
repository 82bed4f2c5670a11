"""Game engine - orchestrates game play."""

import logging
import random
from enum import Enum
from typing import Optional, Callable, Dict, List
from dataclasses import dataclass

from .types import Difficulty, Move, Player
from .game_state import GameState
from .config import Config, get_config
from .ai.eval import set_custom_weights
from .ai.search import choose_move


logger = logging.getLogger(__name__)


class PlayerType(Enum):
    """Type of player."""
    HUMAN = "human"
    BOT = "bot"


@dataclass
class GameResult:
    """Result of a completed or abandoned game."""
    winner: Optional[Player]
    total_moves: int
    final_state: GameState


class Engine:
    """
    Game engine that tracks turns and dispatches to the bot.

    For Human players, the engine waits for make_move.
    For Bot players, play_bot_turn asks the search for a move.
    """

    def __init__(self, config: Optional[Config] = None,
                 rng: Optional[random.Random] = None):
        self.config = config if config is not None else get_config()
        self.state: GameState = GameState.initial()
        self.moves_played = 0

        ai_config = self.config.ai
        self.rng = rng if rng is not None else random.Random(ai_config.seed)
        set_custom_weights(ai_config.weights())

        # Player types and difficulties (default from config)
        self.player_types: Dict[Player, PlayerType] = {
            Player.RED: PlayerType(self.config.players.red_type),
            Player.BLACK: PlayerType(self.config.players.black_type),
        }
        default_difficulty = Difficulty(ai_config.difficulty)
        self.difficulties: Dict[Player, Difficulty] = {
            Player.RED: default_difficulty,
            Player.BLACK: default_difficulty,
        }

        # Callbacks
        self.on_state_changed: Optional[Callable[[GameState], None]] = None
        self.on_game_over: Optional[Callable[[GameResult], None]] = None

    def new_game(self) -> None:
        """Start a new game."""
        self.state = GameState.initial()
        self.moves_played = 0
        self._notify_state_changed()

    def set_player_type(self, player: Player, player_type: PlayerType,
                        difficulty: Optional[Difficulty] = None) -> None:
        """Set the type of a player, and its difficulty for bots."""
        self.player_types[player] = player_type
        if difficulty is not None:
            self.difficulties[player] = Difficulty(difficulty)

    def get_current_player_type(self) -> PlayerType:
        """Get the type of the current player."""
        return self.player_types[self.state.current_player]

    def legal_moves(self) -> List[Move]:
        """Get legal moves for the current player."""
        return self.state.legal_moves()

    def make_move(self, move: Move) -> bool:
        """
        Make a move in the game.

        Returns True if the move was legal and applied.
        """
        if move not in self.state.legal_moves():
            logger.debug("Rejected illegal move %s for %s", move, self.state.current_player.name)
            return False

        player = self.state.current_player
        turn = self.state.turn_count
        self.state = self.state.apply_move(move)
        self.moves_played += 1
        logger.info("Turn %d: %s plays %s", turn, player.name, move)

        self._notify_state_changed()

        if self.state.is_terminal():
            result = self._result()
            logger.info("Game over after %d moves, winner %s",
                        result.total_moves, result.winner.name)
            if self.on_game_over:
                self.on_game_over(result)

        return True

    def play_bot_turn(self) -> Optional[Move]:
        """
        Let the bot for the side to move play one move.

        Returns the move played, or None if the game is over, the side to
        move is human, or the bot has no legal move.
        """
        if self.state.is_terminal() or self.get_current_player_type() != PlayerType.BOT:
            return None

        player = self.state.current_player
        difficulty = self.difficulties[player]
        move = choose_move(
            self.state.board,
            player,
            difficulty,
            self.state.active_piece,
            rng=self.rng,
            max_depth=self.config.ai.depth_for(difficulty),
        )
        if move is None:
            return None

        self.make_move(move)
        return move

    def play_until_human(self, max_plies: int = 500) -> int:
        """Play bot moves until a human is to move or the game ends. Returns moves played."""
        played = 0
        while played < max_plies and self.play_bot_turn() is not None:
            played += 1
        return played

    def run_match(self, max_plies: int = 500) -> GameResult:
        """
        Play bot moves from the current state until the game ends.

        A match reaching ``max_plies`` ends without a winner.
        """
        self.play_until_human(max_plies)
        if not self.state.is_terminal():
            logger.info("Match stopped after %d moves without a winner", self.moves_played)
        return self._result()

    def _result(self) -> GameResult:
        return GameResult(
            winner=self.state.winner,
            total_moves=self.moves_played,
            final_state=self.state,
        )

    def _notify_state_changed(self) -> None:
        """Notify listeners of state change."""
        if self.on_state_changed:
            self.on_state_changed(self.state)
