"""
Rising Drops
============

A casual arcade game: colored drops float up the screen. Click a drop once
to remove its protective outline; unprotected drops merge with whatever
they touch and split in two when clicked again. Score as much as possible
before the clock runs out.
"""

__version__ = "1.0.0"
