import pygame

from .state import Controls

# Command keys for the interactive game
COMMAND_KEYS = {
    pygame.K_s: "start",
    pygame.K_p: "stop",
    pygame.K_c: "continue",
}
DIFFICULTY_KEYS = {
    pygame.K_1: "easy",
    pygame.K_2: "medium",
    pygame.K_3: "hard",
}


def read_controls():
    """Current arrow-key state as Controls."""
    pressed = pygame.key.get_pressed()
    return Controls(
        up=bool(pressed[pygame.K_UP]),
        down=bool(pressed[pygame.K_DOWN]),
        left=bool(pressed[pygame.K_LEFT]),
        right=bool(pressed[pygame.K_RIGHT]),
    )


def apply_command(controller, key):
    """Run the command bound to ``key``. Returns True if one was bound."""
    if key in DIFFICULTY_KEYS:
        controller.set_difficulty(DIFFICULTY_KEYS[key])
        return True

    command = COMMAND_KEYS.get(key)
    if command == "start":
        controller.start()
    elif command == "stop":
        controller.stop()
    elif command == "continue":
        controller.resume()
    else:
        return False
    return True
