"""Building blocks for simple 2D games: colors, geometry, shape meshes, input state, profiling, animation, storage and shader includes."""

__version__ = "0.1.0"