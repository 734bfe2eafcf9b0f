"""Pydantic schemas for request/response validation."""

from .booking import *  # noqa: F403
from .catalog import *  # noqa: F403
from .common import *  # noqa: F403
from .contact import *  # noqa: F403
from .health import *  # noqa: F403
from .reservation import *  # noqa: F403
