"""Transit Router - Build bus route graphs and answer bus, stop and route queries."""

from transit_router.api import answer, process, validate
from transit_router.version import VERSION

__version__ = VERSION
__all__ = ["VERSION", "answer", "process", "validate"]
