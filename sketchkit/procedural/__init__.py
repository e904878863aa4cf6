"""
sketchkit - Procedural generators and entities
"""

from .noise import noise_1d, noise_2d, fbm_2d, noise_field
from .particles import Particle, ParticleOptions
