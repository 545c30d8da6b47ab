import random

import pytest


@pytest.fixture
def rng() -> random.Random:
    """A seeded source, so generated passwords are reproducible."""
    return random.Random(20240611)
