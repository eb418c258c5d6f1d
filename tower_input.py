"""Input commands and keyboard/touch mapping"""
from typing import Dict, Iterable, List, Optional, Tuple

import pygame

from tower_config import CONFIG
from tower_session import Command


KEY_COMMANDS: Dict[int, Tuple[Command, ...]] = {
    pygame.K_LEFT: (Command.MOVE_LEFT,),
    pygame.K_a: (Command.MOVE_LEFT,),
    pygame.K_RIGHT: (Command.MOVE_RIGHT,),
    pygame.K_d: (Command.MOVE_RIGHT,),
    pygame.K_z: (Command.ROTATE_CCW,),
    pygame.K_x: (Command.ROTATE_CW,),
    pygame.K_UP: (Command.ROTATE_CW,),
    pygame.K_w: (Command.ROTATE_CW,),
    # space doubles as restart on the game over screen
    pygame.K_SPACE: (Command.HARD_DROP, Command.RESTART),
    pygame.K_RETURN: (Command.RESTART,),
    pygame.K_r: (Command.RESTART,),
}
SOFT_DROP_KEYS = (pygame.K_DOWN, pygame.K_s)

# Bottom strip buttons: [0]=Left [1]=Right [2]=Rotate [3]=Drop (hard)
TOUCH_BUTTONS = (Command.MOVE_LEFT, Command.MOVE_RIGHT, Command.ROTATE_CW, Command.HARD_DROP)


def commands_for_key(key: int) -> Tuple[Command, ...]:
    return KEY_COMMANDS.get(key, ())


def soft_drop_held(pressed) -> bool:
    return any(pressed[k] for k in SOFT_DROP_KEYS)


def touch_button_at(x: int, y: int, w: int, h: int) -> Optional[int]:
    """Index of the on-screen button under (x, y), or None outside the strip."""
    strip = CONFIG["TOUCH_STRIP_H"]
    if w <= 0 or y < h - strip or y >= h or x < 0 or x >= w: return None
    return min(len(TOUCH_BUTTONS) - 1, x * len(TOUCH_BUTTONS) // w)


class InputCollector:
    """Accumulates commands from pygame events for one frame."""

    def __init__(self):
        self.touches: Dict[int, Tuple[float, float]] = {}
        self.commands: List[Command] = []

    def feed(self, events: Iterable[pygame.event.Event], w: int, h: int):
        for e in events:
            if e.type == pygame.KEYDOWN:
                self.commands.extend(commands_for_key(e.key))
            elif e.type == pygame.FINGERDOWN:
                pos = (e.x * w, e.y * h)
                self.touches[e.finger_id] = pos
                self.commands.extend(self._touch_commands(pos, w, h))
            elif e.type == pygame.FINGERMOTION:
                self.touches[e.finger_id] = (e.x * w, e.y * h)
            elif e.type == pygame.FINGERUP:
                self.touches.pop(e.finger_id, None)

    @staticmethod
    def _touch_commands(pos, w, h) -> Tuple[Command, ...]:
        b = touch_button_at(int(pos[0]), int(pos[1]), w, h)
        if b is None:
            return (Command.RESTART,)
        # any tap also restarts a finished match
        return (TOUCH_BUTTONS[b], Command.RESTART)

    def touch_soft_drop(self, w: int, h: int) -> bool:
        # holding either move button also soft drops
        for x, y in self.touches.values():
            if touch_button_at(int(x), int(y), w, h) in (0, 1):
                return True
        return False

    def drain(self) -> List[Command]:
        out, self.commands = self.commands, []
        return out
