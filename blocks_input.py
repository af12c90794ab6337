
"""Keyboard to engine command mapping"""
from typing import Dict, Optional
import pygame
from blocks_engine import Command

KEY_COMMANDS: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_SPACE: Command.HARD_DROP,
    # stand-ins for the start / pause / restart buttons
    pygame.K_RETURN: Command.START,
    pygame.K_KP_ENTER: Command.START,
    pygame.K_p: Command.TOGGLE_PAUSE,
    pygame.K_r: Command.RESTART,
}

def command_for_key(key: int) -> Optional[Command]:
    return KEY_COMMANDS.get(key)
