import pytest

pygame = pytest.importorskip("pygame")

from rocket_dodge.controller import RunPhase
from rocket_dodge.keyboard import apply_command


def test_command_keys(controller):
    assert apply_command(controller, pygame.K_s)
    assert controller.phase is RunPhase.RUNNING

    assert apply_command(controller, pygame.K_p)
    assert controller.phase is RunPhase.PAUSED

    assert apply_command(controller, pygame.K_c)
    assert controller.phase is RunPhase.RUNNING


def test_difficulty_keys(controller):
    assert apply_command(controller, pygame.K_3)
    assert controller.difficulty == "hard"
    assert apply_command(controller, pygame.K_2)
    assert controller.difficulty == "medium"


def test_unbound_key(controller):
    assert not apply_command(controller, pygame.K_q)
    assert controller.phase is RunPhase.IDLE
