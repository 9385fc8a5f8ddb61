"""
Constants related to the Pong game
"""

import pygame

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
SCREEN_CAPTION = "Pong with Sound"
FPS = 60

PADDLE_WIDTH = 15
PADDLE_HEIGHT = 80
PADDLE_MARGIN = 30  # distance between a paddle and its side of the screen
PADDLE_SPEED = 5

BALL_SIZE = 15
BALL_SPEED = 3

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

FONT_NAME = "arial"
SCORE_FONT_SIZE = 30
PROMPT_FONT_SIZE = 20
SCORE_BASELINE_Y = 50
LEFT_SCORE_X = SCREEN_WIDTH // 2 - 50
RIGHT_SCORE_X = SCREEN_WIDTH // 2 + 30
START_PROMPT = "Press SPACE to start"

# Key bindings
KEY_LEFT_PADDLE_UP = pygame.K_w
KEY_LEFT_PADDLE_DOWN = pygame.K_s
KEY_RIGHT_PADDLE_UP = pygame.K_UP
KEY_RIGHT_PADDLE_DOWN = pygame.K_DOWN
KEY_START = pygame.K_SPACE
KEY_QUIT = pygame.K_ESCAPE

ARG_MUTE = "mute"
ARG_LOG_LEVEL = "log_level"
