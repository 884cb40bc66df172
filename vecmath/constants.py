#!/usr/bin/env python3
"""
Shared constants for vecmath (angles in radians unless stated otherwise).

Keeping constants in one place helps ensure conversions are consistent across
the codebase and gives every function the same defaults.
"""
import math

# Angles
PI = math.pi
TAU = 2.0 * math.pi  # full turn
SPI = math.pi / 2.0  # quarter turn
QPI = math.pi / 4.0  # eighth turn

# Unit conversion factors
DEG2RAD = math.pi / 180.0
RAD2DEG = 180.0 / math.pi

# Function defaults
DEFAULT_DIGITS = 1  # fractional digits kept by round()
DEFAULT_CLAMP_MIN = 0.0
DEFAULT_CLAMP_MAX = 1.0
