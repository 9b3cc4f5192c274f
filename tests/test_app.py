from unittest.mock import patch

import pygame
import pytest

from shootemup.app import FrameLimiter, init_display, main
from shootemup.entities import SCREEN_HEIGHT, SCREEN_WIDTH


@pytest.fixture
def dummy_video(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield
    pygame.quit()


def test_first_frame_waits_full_budget():
    limiter = FrameLimiter(then=0, remainder=0.0)
    assert limiter.next_wait(0) == 16
    assert limiter.remainder == pytest.approx(0.667)


def test_elapsed_time_is_subtracted():
    limiter = FrameLimiter(then=100, remainder=0.0)
    wait = limiter.next_wait(105)
    assert wait + 5 == 16


def test_wait_never_drops_below_one():
    limiter = FrameLimiter(then=0, remainder=0.0)
    assert limiter.next_wait(1000) == 1


def test_remainder_stays_below_two():
    limiter = FrameLimiter()
    for _ in range(100):
        limiter.next_wait(limiter.then)
        assert 0 <= limiter.remainder < 2


def test_average_frame_approaches_target():
    limiter = FrameLimiter()
    total = sum(limiter.next_wait(limiter.then) for _ in range(300))
    assert abs(total / 300 - 16.667) < 0.01


def test_wait_sleeps_and_records_new_tick():
    readings = iter([5, 21])
    delays = []
    limiter = FrameLimiter(then=0, ticks=lambda: next(readings), delay=delays.append)
    slept = limiter.wait()
    assert delays == [slept]
    assert slept + 5 == 16
    assert limiter.then == 21


def test_init_display_opens_game_window(dummy_video):
    screen = init_display()
    assert screen.get_size() == (SCREEN_WIDTH, SCREEN_HEIGHT)
    assert pygame.display.get_caption()[0] == "Shooter 01"


def test_main_runs_until_quit(dummy_video, tmp_path):
    pygame.image.save(pygame.Surface((70, 70)), str(tmp_path / "personaje.png"))
    pygame.image.save(pygame.Surface((20, 10)), str(tmp_path / "bala.png"))
    with patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        assert main(["--assets", str(tmp_path)]) == 0


def test_main_reports_missing_assets(dummy_video, tmp_path, capsys):
    assert main(["--assets", str(tmp_path)]) == 1
    assert "personaje.png" in capsys.readouterr().err