"""Joystick target-hunting game on a simulated SSD1306 display and 5x5 LED matrix, played from input scripts."""

__version__ = "0.1.0"