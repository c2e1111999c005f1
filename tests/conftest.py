"""
Pytest configuration for the Schema Builder test suite.

Provides field trees shared across the tree, document and handler tests.
"""

import pytest

from schema_builder.fields import Field


@pytest.fixture
def sample_tree():
    """
    name: string
    address: nested
        city: string
    """
    return (
        Field(id="name-id", key="name", type="string"),
        Field(
            id="address-id",
            key="address",
            type="nested",
            children=(Field(id="city-id", key="city", type="string"),),
        ),
    )


@pytest.fixture
def deep_tree():
    """Five nested levels: level0 > level1 > ... > level4 > leaf."""
    node = Field(id="leaf-id", key="leaf", type="number")
    for depth in reversed(range(5)):
        node = Field(
            id=f"level{depth}-id",
            key=f"level{depth}",
            type="nested",
            required=depth % 2 == 0,
            children=(node,),
        )
    sibling = Field(id="sibling-id", key="sibling", type="boolean")
    return (node, sibling)
