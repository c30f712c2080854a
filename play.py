import logging

import pygame

from rocket_dodge.keyboard import apply_command, read_controls
from rocket_dodge.rocket_dodge import RocketDodge


def run_game():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    # Create the environment with render_mode='human' to see the window
    env = RocketDodge(render_mode="human")
    # Wait on the start screen until S is pressed
    env.reset(options={"autostart": False})
    env.render()

    def announce(score):
        print(f"Collision with an asteroid. Game over. Your score: {score}")

    env.controller.on_game_over(announce)

    print("--- ROCKET DODGE ---")
    print("Arrows: UP main engine, DOWN retro engine, LEFT/RIGHT rotate")
    print("S start, P stop, C continue, 1/2/3 easy/medium/hard, ESC quit")

    running = True
    while running:
        # Check for Pygame quit and command key events
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    apply_command(env.controller, event.key)

        # One frame of simulation with the current arrow keys
        controls = read_controls()
        env.step([controls.up, controls.down, controls.left, controls.right])

    env.close()

if __name__ == "__main__":
    run_game()
