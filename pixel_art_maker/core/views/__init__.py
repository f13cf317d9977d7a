"""View components for the pixel art maker"""
