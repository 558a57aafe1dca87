"""Pydantic schemas for request/response validation."""

from .auth import *  # noqa: F403
from .car import *  # noqa: F403
from .common import *  # noqa: F403
from .favorite import *  # noqa: F403
from .itinerary import *  # noqa: F403
from .review import *  # noqa: F403
from .tour import *  # noqa: F403
