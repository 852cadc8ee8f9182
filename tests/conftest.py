import itertools

import pytest

from pyboothpatch.model.core import PlacedItem


@pytest.fixture
def place():
    """
    Fixture that returns a factory for PlacedItems with sequential ids.
    Usage:
        def test_something(place):
            mixer = place("djm-900", x=500)
            deck = place("cdj-3000", x=100, face="back")
    """
    counter = itertools.count(1)

    def _place(device_id: str, x: float = 0.0, y: float = 0.0, face: str = "front"):
        return PlacedItem(
            instance_id=f"dev-{next(counter)}",
            device_id=device_id,
            x=x,
            y=y,
            face=face,
        )

    return _place
