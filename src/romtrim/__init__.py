"""
RomTrim - removes the power-of-two padding from cartridge ROM images
"""

__version__ = "0.1.0"
