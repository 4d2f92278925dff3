"""Signed wrapper graph built over a pathway model."""

from .base import AbstractNode, Direction, Edge, Graph, Sign, path_sign
from .query import bfs, neighborhood
from .wrappers import (
    ControlWrapper,
    ConversionWrapper,
    PhysicalEntityWrapper,
    TemplateReactionWrapper,
)

__all__ = [
    "AbstractNode",
    "ControlWrapper",
    "ConversionWrapper",
    "Direction",
    "Edge",
    "Graph",
    "PhysicalEntityWrapper",
    "Sign",
    "TemplateReactionWrapper",
    "bfs",
    "neighborhood",
    "path_sign",
]
