#!/usr/bin/env python3
"""Convenience launcher for the pixel art maker from root directory"""

import sys

from pixel_art_maker.core.pixel_art_editor import main

if __name__ == "__main__":
    sys.exit(main())
