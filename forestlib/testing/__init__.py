"""Testing utilities for forestlib consumers."""

from .fixtures import RecordingResolver, make_forest, node_names, forest_shape

__all__ = ['RecordingResolver', 'make_forest', 'node_names', 'forest_shape']
