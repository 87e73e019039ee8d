"""Game state and the active-piece controller.

All mutable state of one game (board, active piece, next piece, score and
speed) lives on a ``Game`` instance, so any number of games can run side by
side and tests never need a display.

  • Commands: ``dispatch(Command.X)`` is the only entry point input needs
  • Time: ``tick(dt_ms)`` advances the fall timer, at most one drop per call
  • Rendering: ``snapshot()`` returns a read-only copy of what to draw
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from blockfall_board import Board, create_board, clear, collide, merge, sweep, ghost_y
from blockfall_config import CONFIG, DIFFICULTIES
from blockfall_highscore import MemoryHighScoreStore
from blockfall_piece import Matrix, Piece, create_piece, rotate_cw
from blockfall_rng import BagRandom
from blockfall_speed import SpeedState

log = logging.getLogger(__name__)

Grid = Tuple[Tuple[int, ...], ...]


class Command(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    HARD_DROP = "hard_drop"
    ROTATE = "rotate"
    PAUSE = "pause"
    RESUME = "resume"


@dataclass(frozen=True)
class Snapshot:
    grid: Grid
    shape: Optional[Grid]
    x: int
    y: int
    ghost_y: Optional[int]
    next_shape: Grid
    score: int
    high_score: int
    interval: int
    level: int
    show_ghost: bool
    paused: bool
    game_over: bool
    started: bool


def _freeze(m: Matrix) -> Grid:
    return tuple(tuple(r) for r in m)


class Game:
    def __init__(self, bag=None, store=None, level: Optional[int] = None,
                 show_ghost: Optional[bool] = None,
                 on_game_over: Optional[Callable[[int], None]] = None,
                 on_lines_cleared: Optional[Callable[[int], None]] = None):
        self.board: Board = create_board()
        self.bag = bag if bag is not None else BagRandom(CONFIG["BAG_SEED"])
        self.store = store if store is not None else MemoryHighScoreStore()
        self.speed = SpeedState(level=CONFIG["SPEED_LEVEL"] if level is None else level)
        self.show_ghost = CONFIG["SHOW_GHOST"] if show_ghost is None else show_ghost
        self.on_game_over = on_game_over
        self.on_lines_cleared = on_lines_cleared

        self.piece: Optional[Piece] = None
        self.next_shape: Matrix = create_piece(self.bag.next())
        self.drop_counter = 0.0
        self.high_score = self.store.get_high_score()

        self.started = False
        self.paused = True
        self.game_over = False

    # ---------- read-only views ----------
    @property
    def score(self) -> int:
        return self.speed.score

    @property
    def interval(self) -> int:
        return self.speed.interval

    @property
    def active(self) -> bool:
        return self.started and not self.paused and not self.game_over and self.piece is not None

    def ghost_position(self) -> Optional[int]:
        """Where the active piece would land; never mutates state."""
        if self.piece is None:
            return None
        return ghost_y(self.board, self.piece.shape, self.piece.x, self.piece.y)

    def snapshot(self) -> Snapshot:
        p = self.piece
        return Snapshot(
            grid=_freeze(self.board),
            shape=_freeze(p.shape) if p else None,
            x=p.x if p else 0,
            y=p.y if p else 0,
            ghost_y=self.ghost_position(),
            next_shape=_freeze(self.next_shape),
            score=self.score,
            high_score=self.high_score,
            interval=self.interval,
            level=self.speed.level,
            show_ghost=self.show_ghost,
            paused=self.paused,
            game_over=self.game_over,
            started=self.started,
        )

    # ---------- lifecycle ----------
    def new_game(self):
        clear(self.board)
        self.speed.reset()
        self.drop_counter = 0.0
        self.game_over = False
        self.started = True
        self.paused = False
        self.spawn()
        self.high_score = max(self.high_score, self.store.get_high_score())

    def back_to_menu(self):
        self.started = False
        self.paused = True

    def pause(self):
        if self.started and not self.game_over:
            self.paused = True

    def resume(self):
        if self.started and not self.game_over:
            self.paused = False

    def toggle_pause(self):
        if self.paused:
            self.resume()
        else:
            self.pause()

    def _end(self):
        self.game_over = True
        self.paused = True
        self.drop_counter = 0.0
        if self.store.record_high_score(self.score):
            self.high_score = self.score
        log.debug("game over, score=%d", self.score)
        if self.on_game_over:
            self.on_game_over(self.score)

    # ---------- operator controls ----------
    def set_speed_level(self, level) -> int:
        self.speed.set_level(level)
        self.drop_counter = 0.0
        return self.speed.level

    def set_fall_interval_ms(self, ms) -> int:
        self.drop_counter = 0.0
        return self.speed.set_interval_ms(ms)

    def toggle_ghost(self) -> bool:
        self.show_ghost = not self.show_ghost
        return self.show_ghost

    def apply_difficulty(self, name: str):
        preset = DIFFICULTIES[name]
        self.show_ghost = preset["SHOW_GHOST"]
        self.speed.level = preset["SPEED_LEVEL"]
        self.new_game()

    # ---------- active piece ----------
    def spawn(self) -> bool:
        self.piece = Piece.spawn(self.next_shape)
        if collide(self.board, self.piece.shape, self.piece.x, self.piece.y):
            self._end()
            return False
        self.next_shape = create_piece(self.bag.next())
        log.debug("spawned at x=%d", self.piece.x)
        return True

    def _collides(self) -> bool:
        p = self.piece
        return collide(self.board, p.shape, p.x, p.y)

    def move(self, dx: int) -> bool:
        self.piece.x += dx
        if self._collides():
            self.piece.x -= dx
            return False
        return True

    def rotate(self) -> bool:
        """Rotate clockwise, nudging one cell right then left if blocked.

        When neither nudge fits the rotation is undone and the piece is
        back where it started.
        """
        p = self.piece
        rotate_cw(p.shape)
        if not self._collides():
            return True
        p.x += 1
        if not self._collides():
            return True
        p.x -= 2
        if not self._collides():
            return True
        rotate_cw(p.shape); rotate_cw(p.shape); rotate_cw(p.shape)
        p.x += 1
        return False

    def soft_drop(self) -> bool:
        """Drop one row; settle instead if blocked. Returns True if the piece settled."""
        self.piece.y += 1
        settled = False
        if self._collides():
            self.piece.y -= 1
            self._settle()
            settled = True
        self.drop_counter = 0.0
        return settled

    def hard_drop(self) -> int:
        """Drop straight to the resting row and settle; returns rows fallen."""
        start = self.piece.y
        while not self._collides():
            self.piece.y += 1
        self.piece.y -= 1
        fallen = self.piece.y - start
        self._settle()
        return fallen

    def _settle(self):
        p = self.piece
        merge(self.board, p.shape, p.x, p.y)
        lines = sweep(self.board)
        if lines:
            log.debug("lines cleared: %d", lines)
        if self.speed.on_lines_cleared(lines):
            self.drop_counter = 0.0
        if lines and self.on_lines_cleared:
            self.on_lines_cleared(lines)
        self.spawn()

    # ---------- input + time ----------
    def dispatch(self, command: Command):
        if command is Command.PAUSE:
            return self.pause()
        if command is Command.RESUME:
            return self.resume()
        if not self.active:
            return None
        if command is Command.MOVE_LEFT:
            return self.move(-1)
        if command is Command.MOVE_RIGHT:
            return self.move(1)
        if command is Command.SOFT_DROP:
            return self.soft_drop()
        if command is Command.HARD_DROP:
            return self.hard_drop()
        if command is Command.ROTATE:
            return self.rotate()
        raise ValueError(f"unknown command {command!r}")

    def tick(self, dt_ms: float) -> bool:
        """Advance the fall timer; drops one row once it exceeds the interval."""
        if not self.active:
            return False
        self.drop_counter += dt_ms
        if self.drop_counter > self.speed.interval:
            self.soft_drop()
            return True
        return False
