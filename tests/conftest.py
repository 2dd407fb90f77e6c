"""Shared test fixtures for bbox2d."""

import pytest

from bbox2d import Rectangle


@pytest.fixture
def rect_a():
    """A = (350, 400, 200, 250) given in reversed corner order."""
    return Rectangle.from_bounds(350, 400, 200, 250)


@pytest.fixture
def rect_b():
    """B = (300, 200, 400, 350), overlapping A."""
    return Rectangle.from_array([300, 200, 400, 350])


@pytest.fixture
def unit_square():
    """(0, 0) to (2, 2)."""
    return Rectangle.from_array([0.0, 0.0, 2.0, 2.0])


@pytest.fixture
def rect_pairs():
    """Pairs covering overlap, containment, edge/corner touch and separation."""
    m1 = Rectangle.from_array([0.0, 0.0, 2.0, 2.0])
    return [
        (m1, Rectangle.from_array([4.0, 5.0, 8.0, 9.0])),        # apart
        (m1, Rectangle.from_array([1.7, 1.5, 5.0, 9.0])),        # overlap
        (m1, Rectangle.from_array([1.0, 1.0, 1.5, 1.5])),        # contained
        (m1, Rectangle.from_array([2.0, 0.0, 3.0, 2.0])),        # shared edge
        (m1, Rectangle.from_array([2.0, 2.0, 3.0, 3.0])),        # shared corner
        (m1, Rectangle.from_array([2.000045, 2.00001, 4.0, 4.0])),  # just apart
        (
            Rectangle.from_array([5.0, 11.0, 8.0, 9.0]),
            Rectangle.from_array([4.0, 5.0, 8.0, 9.0]),
        ),
        (
            Rectangle.from_array([0.0, 0.0, 2.0, -2.0]),
            Rectangle.from_array([-2.0, 1.0, 4.0, -2.0]),
        ),
    ]


@pytest.fixture
def outside_point():
    """Lies outside A & B but inside A & B padded by (30, 25)."""
    return (367.74747560229144, 363.2231833134207)
