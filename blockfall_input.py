"""Key map: pygame key events to game commands"""
from typing import Optional

import pygame

from blockfall_game import Command

KEYMAP = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_q: Command.ROTATE,
}

PAUSE_KEYS = (pygame.K_p,)


def command_for(key: int, paused: bool = False) -> Optional[Command]:
    """Translate a key code; P toggles between PAUSE and RESUME."""
    if key in PAUSE_KEYS:
        return Command.RESUME if paused else Command.PAUSE
    return KEYMAP.get(key)
