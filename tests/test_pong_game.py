# tests/test_pong_game.py

"""Tests for the game loop."""

import pygame
import pytest

from src.models.pong import MatchPhase, SoundEvent
from src.pong.pong_game import PongGame


class RecordingAudio:
    """Records the sound events the loop asks to play."""

    enabled = False

    def __init__(self):
        self.played = []
        self.closed = False

    def play_all(self, events):
        self.played.extend(events)

    def close(self):
        self.closed = True


@pytest.fixture
def game():
    pong_game = PongGame(headless=True, muted=True)
    pong_game.audio = RecordingAudio()
    yield pong_game
    pygame.quit()


def queue(monkeypatch, *events):
    """Make the next pygame.event.get() return the given events."""
    batches = [list(events)]
    monkeypatch.setattr(pygame.event, "get", lambda: batches.pop() if batches else [])


class TestPongGame:
    """Test the PongGame loop."""

    def test_idle_before_start(self, game, monkeypatch):
        queue(monkeypatch)
        ball_before = game.state.ball.position.copy()

        for _ in range(10):
            assert game.tick()

        assert game.state.ball.position == ball_before
        assert game.audio.played == []

    def test_start_key_starts_and_beeps(self, game, monkeypatch):
        space = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
        queue(monkeypatch, space)

        assert game.tick()

        assert game.state.phase == MatchPhase.RUNNING
        assert game.audio.played == [SoundEvent.START]
        # the update runs in the same tick as the start
        assert game.state.ball.position.x == 396

    def test_repeated_start_beeps_once(self, game, monkeypatch):
        space = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE)
        queue(monkeypatch, space, space)
        game.tick()
        queue(monkeypatch, space)
        game.tick()

        assert game.audio.played == [SoundEvent.START]

    def test_score_sound_played(self, game, monkeypatch):
        queue(monkeypatch)
        game.state.start()
        game.state.ball.position.x = 799

        game.tick()

        assert game.state.score.left == 1
        assert game.audio.played == [SoundEvent.SCORE]

    def test_quit_stops_loop(self, game, monkeypatch):
        queue(monkeypatch, pygame.event.Event(pygame.QUIT))
        assert not game.tick()

    def test_run_closes_on_quit(self, game, monkeypatch):
        queue(monkeypatch, pygame.event.Event(pygame.QUIT))
        game.run()
        assert game.audio.closed

    def test_render_draws_to_screen(self, game):
        game.render()
        ball = game.state.ball.position
        assert game.screen.get_at(ball.center) == pygame.Color(255, 255, 255)
