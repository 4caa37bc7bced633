"""
Configuration constants for the pizza manager.

This module contains all configuration values and constants used throughout
the simulation. Centralizing these makes it easy to adjust how pizzas are
generated and how the collection grows.
"""

import logging
import os

logger = logging.getLogger(__name__)

# =============================================================================
# SEQUENCE CONTAINER
# =============================================================================

# Starting number of slots in a new ArrayList's backing storage.
DEFAULT_ARRAY_SIZE = 50

# Number of slots added each time the backing storage fills up.
# Fixed-increment growth (not doubling): collections with many repeated
# entries waste less space, at the cost of more frequent reallocation when
# most entries are unique.
DEFAULT_GROWTH_SIZE = 10


# =============================================================================
# MONEY
# =============================================================================

MAX_CENTS = 99


# =============================================================================
# RANDOM PIZZA GENERATION
# =============================================================================

DEFAULT_RANDOM_CIRCLE_RADIUS = 20
DEFAULT_RANDOM_SQUARE_SIDE_LENGTH = 10

# A random pizza gets between 1 and this many ingredients (inclusive).
MAX_NUM_RANDOM_INGREDIENTS = 20

# How many pizzas the "add a (H)undred" command creates.
BULK_PIZZA_COUNT = 100

DEFAULT_SHAPE_COLOR = "orange"


# =============================================================================
# ENVIRONMENT OVERRIDES
# =============================================================================

LOG_LEVEL = os.getenv("PIZZA_MANAGER_LOG_LEVEL", "WARNING").upper()


def random_seed():
    """Return the integer seed from PIZZA_MANAGER_SEED, or None if unset or malformed."""
    value = os.getenv("PIZZA_MANAGER_SEED")
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        logger.warning("Ignoring PIZZA_MANAGER_SEED=%r: not an integer", value)
        return None
