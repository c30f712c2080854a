import pygame
import math
import numpy as np
import random
from .settings import *

class RocketVisualizer:
    def __init__(self, env):
        self.env = env
        self.screen = None
        self.clock = None
        self.font = None
        self.big_font = None
        self.current_flame_power = 0.0
        self.stars = []

    def init_window(self, mode="human"):
        """Initializes the Pygame surface and generates static stars."""
        if self.screen is None:
            pygame.init()
            if mode == "human":
                pygame.display.init()
                pygame.display.set_caption("Rocket Dodge")
                self.screen = pygame.display.set_mode((VIEWPORT_W, VIEWPORT_H))
            else:
                self.screen = pygame.Surface((VIEWPORT_W, VIEWPORT_H))
            self.clock = pygame.time.Clock()
            self.font = pygame.font.SysFont("Arial", 20)
            self.big_font = pygame.font.SysFont("Arial", 40, bold=True)

            # --- GENERATE STARS ONCE ---
            self.stars = []
            for _ in range(150):
                x = random.randint(0, VIEWPORT_W)
                y = random.randint(0, VIEWPORT_H)
                radius = random.randint(1, 2)
                self.stars.append((x, y, radius))

    def render(self, mode="human"):
        """Renders stars, asteroids, the rocket and the HUD."""
        if mode is None:
            return None
        self.init_window(mode)
        controller = self.env.controller

        # --- 1. BACKGROUND ---
        self.screen.fill(SKY_COLOR)
        for x, y, radius in self.stars:
            pygame.draw.circle(self.screen, (255, 255, 255), (x, y), radius)

        if controller is not None:
            # --- 2. ASTEROIDS ---
            for obstacle in controller.field:
                self._draw_asteroid(obstacle)

            # --- 3. ROCKET & HUD ---
            self._draw_exhaust(controller)
            self._draw_rocket(controller.rocket)
            self._draw_hud(controller)

        # Display
        if mode == "human":
            pygame.event.pump()
            self.clock.tick(FPS)
            pygame.display.flip()
        elif mode == "rgb_array":
            return np.transpose(
                np.array(pygame.surfarray.pixels3d(self.screen)), axes=(1, 0, 2)
            )

    def _draw_asteroid(self, obstacle):
        # Sprite is larger than the forgiving hitbox
        visual_radius = int(ASTEROID_BASE_RADIUS * obstacle.scale)
        center = (int(obstacle.x), int(obstacle.y))
        pygame.draw.circle(self.screen, ASTEROID_COLOR, center, visual_radius)
        pygame.draw.circle(self.screen, ASTEROID_EDGE, center, visual_radius, 3)

    def _draw_rocket(self, rocket):
        """Draws the rocket body, nose cone and fins around its centre."""
        heading = rocket.heading

        # Helper: rotate a local point (y up the rocket) onto the screen.
        # Heading turns clockwise on screen, hence the negated angle.
        def transform_point(local_x, local_y):
            rot_x = local_x * math.cos(heading) + local_y * math.sin(heading)
            rot_y = -local_x * math.sin(heading) + local_y * math.cos(heading)
            return (rocket.x + rot_x, rocket.y - rot_y)

        half_w = ROCKET_WIDTH / 2
        half_h = ROCKET_HEIGHT / 2

        # Body
        body_points = [
            transform_point(-half_w, -half_h),
            transform_point( half_w, -half_h),
            transform_point( half_w, half_h - NOSE_HEIGHT),
            transform_point(-half_w, half_h - NOSE_HEIGHT),
        ]
        pygame.draw.polygon(self.screen, ROCKET_COLOR, body_points)
        pygame.draw.polygon(self.screen, OUTLINE_COLOR, body_points, 2)

        # Nose Cone
        nose_points = [
            transform_point(-half_w, half_h - NOSE_HEIGHT),
            transform_point( half_w, half_h - NOSE_HEIGHT),
            transform_point(0, half_h)
        ]
        pygame.draw.polygon(self.screen, NOSE_COLOR, nose_points)
        pygame.draw.polygon(self.screen, OUTLINE_COLOR, nose_points, 2)

        # Fins
        fin_h = ROCKET_HEIGHT * 0.3
        fin_w = half_w * 0.8
        for side in (-1, 1):
            fin = [
                transform_point(side * half_w, -half_h),
                transform_point(side * half_w, -half_h + fin_h),
                transform_point(side * (half_w + fin_w), -half_h)
            ]
            pygame.draw.polygon(self.screen, FIN_COLOR, fin)
            pygame.draw.polygon(self.screen, OUTLINE_COLOR, fin, 2)

    def _draw_exhaust(self, controller):
        rocket = controller.rocket
        power = abs(rocket.fuel_consumption) / controller.settings.max_fuel_consumption
        self.current_flame_power += (power - self.current_flame_power) * 0.2
        if self.current_flame_power < 0.05: return

        # Flicker
        t = pygame.time.get_ticks() * 0.05
        flicker = (math.sin(t) * 2.0) + (math.cos(t * 3) * 1.0)

        flame_len = (self.current_flame_power * 40.0) + flicker
        flame_w = ROCKET_WIDTH / 2 * max(0.3, self.current_flame_power)

        # Main engine fires from the tail, retro engine from the nose
        dir_x, dir_y = math.sin(rocket.heading), -math.cos(rocket.heading)
        sign = 1 if rocket.fuel_consumption >= 0 else -1
        nozzle_x = rocket.x - sign * dir_x * ROCKET_HEIGHT / 2
        nozzle_y = rocket.y - sign * dir_y * ROCKET_HEIGHT / 2

        tip = (nozzle_x - sign * dir_x * flame_len, nozzle_y - sign * dir_y * flame_len)
        base_l = (nozzle_x + dir_y * flame_w, nozzle_y - dir_x * flame_w)
        base_r = (nozzle_x - dir_y * flame_w, nozzle_y + dir_x * flame_w)
        pygame.draw.polygon(self.screen, FLAME_COLOR, [base_l, base_r, tip])

    def _draw_hud(self, controller):
        rocket = controller.rocket
        level = DIFFICULTY_LABELS.get(controller.difficulty, "Custom")

        texts = [
            f"Score: {controller.score}",
            f"Level: {level}",
            f"Speed: {rocket.speed:.1f} m/s",
            f"Burn: {rocket.fuel_consumption:.1f} kg/s",
            f"Heading: {math.degrees(rocket.heading):.1f}"
        ]

        for i, t in enumerate(texts):
            label = self.font.render(t, True, HUD_TEXT_COLOR)
            self.screen.blit(label, (10, 10 + (i * 20)))

        # Fuel Bar
        fuel_pct = max(0, rocket.fuel / controller.settings.fuel_mass)
        bar_x = VIEWPORT_W - 220
        bar_y = 30

        pygame.draw.rect(self.screen, FUEL_BAR_BORDER, (bar_x, bar_y, 200, 20), 2)
        pygame.draw.rect(self.screen, FUEL_BAR_COLOR_FULL, (bar_x+2, bar_y+2, 196 * fuel_pct, 16))

        lbl = self.font.render("FUEL", True, HUD_TEXT_COLOR)
        self.screen.blit(lbl, (bar_x, bar_y - 20))

        # Phase banner
        banner = {"idle": "PRESS S TO START", "paused": "PAUSED"}.get(controller.phase.value)
        if banner:
            text = self.big_font.render(banner, True, HUD_TEXT_COLOR)
            rect = text.get_rect(center=(VIEWPORT_W // 2, VIEWPORT_H // 2))
            self.screen.blit(text, rect)

    def close(self):
        if self.screen is not None:
            pygame.display.quit()
            pygame.quit()
            self.screen = None
