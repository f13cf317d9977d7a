"""Pixel art maker: a fixed-grid canvas with palette and undo/redo/save controls"""
