import pytest
from datetime import date


@pytest.fixture
def sample_roster(seed):
    """Two active players, one inactive player and a coach."""
    seed.player("p-ana", name="Ana", position="Guard")
    seed.player("p-ben", name="Ben")
    seed.player("p-old", name="Cleo", is_active=False)
    seed.player("c-dan", name="Dan", role="coach")
    seed.workout("p-ana", date(2024, 3, 4), duration=45)
    seed.workout("p-ana", date(2024, 3, 6), duration=30)
    seed.workout("p-ben", date(2024, 3, 10), duration=60)
    seed.workout("p-ben", date(2024, 3, 11), duration=60)
