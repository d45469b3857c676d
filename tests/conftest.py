import pytest

from pixator.random_source import check_range


class FixedRandom:
    """Random source that replays a scripted list of integers."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def next_int(self, min_inclusive, max_exclusive):
        check_range(min_inclusive, max_exclusive)
        assert self.values, f"ran out of scripted values at next_int({min_inclusive}, {max_exclusive})"
        value = self.values.pop(0)
        assert min_inclusive <= value < max_exclusive, (
            f"scripted value {value} outside [{min_inclusive}, {max_exclusive})"
        )
        self.calls.append((min_inclusive, max_exclusive))
        return value


@pytest.fixture
def fixed_random():
    return FixedRandom
