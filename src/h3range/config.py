"""
Tunables for the range search, read from the environment.

The two safety factors are empirical geometry-fit constants. They can be
overridden per deployment (or in a .env file) without code changes.
"""
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Resolution is acceptable once edge_length * factor exceeds the radius
RESOLUTION_SAFETY_FACTOR = float(os.getenv("H3RANGE_RESOLUTION_SAFETY_FACTOR", "3"))

# Ring count divisor: k = radius / (cell_radius * factor) + 1
RING_SAFETY_FACTOR = float(os.getenv("H3RANGE_RING_SAFETY_FACTOR", "2.5"))

# Resolution used when indexing an entity without an explicit resolution.
# Entities must be indexed at least as fine as any query cell, so 15 is safest.
INDEX_RESOLUTION = int(os.getenv("H3RANGE_INDEX_RESOLUTION", "15"))
