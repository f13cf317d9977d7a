"""
Colors shared by the pixel art maker tests.
"""

WHITE = (255, 255, 255, 255)
RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
TRANSLUCENT = (0, 128, 0, 100)
