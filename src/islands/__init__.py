"""
islands: procedural island heightmaps on a hexagonal lattice

Particles are dropped one at a time on a honeycomb. Each particle makes
its neighborhood more likely to receive the next one, so the particles
clump together and their accumulated density reads as a map of islands.

Layers:
- core: lattice, kernel, sampler and the placement engine
- analysis: island statistics derived from exported heightmaps
- viz: mesh triangulation, camera and matplotlib rendering

The engine logs through structlog (construction and run start at debug,
run summaries at info). Applications choose the level and output with
structlog.configure(), as demo/demo_islands.py does.
"""

__version__ = "0.1.0"
