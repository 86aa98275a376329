"""Announcement and embed colours (0xRRGGBB)."""

GOLD = 0xFFD700
GREEN = 0x00FF00
RED = 0xFF0000
BLUE = 0x0000FF
ORANGE = 0xFF6600
AMBER = 0xFFAA00
GREY = 0xCCCCCC
WHITE = 0xFFFFFF
SKY = 0x00AAFF
CYAN = 0x00FFFF
ASSIST_BLUE = 0x0066FF
OWN_GOAL_RED = 0xFF4444
LIGHT_RED = 0xFF6666
LIGHT_BLUE = 0x6666FF
DISCORD_BLURPLE = 0x7289DA
