import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so that "smart_scheduler" can be found
# structure: <root>/smart_scheduler/tests/conftest.py
current_dir = Path(__file__).parent.absolute()
root_dir = current_dir.parent.parent
sys.path.insert(0, str(root_dir))

from smart_scheduler.tests.helpers import FIXED_NOW  # noqa: E402


@pytest.fixture
def fixed_clock():
    from smart_scheduler.core.clock import FixedClock
    return FixedClock(FIXED_NOW)


@pytest.fixture
def memory_store():
    from smart_scheduler.storage.memory import InMemoryCalendarStore
    return InMemoryCalendarStore()


@pytest.fixture
def demo_store(memory_store):
    """In-memory store holding the demo calendar (user1..user5 on 2025-08-09 IST)."""
    from smart_scheduler.storage.seed import seed_demo_data
    seed_demo_data(memory_store)
    return memory_store


@pytest.fixture
def scheduler(demo_store, fixed_clock):
    from smart_scheduler.services.scheduler import SchedulingService
    return SchedulingService(store=demo_store, clock=fixed_clock)
