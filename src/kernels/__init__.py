"""
Kernel layer.

This package groups the deterministic array-rotation kernels.
- `src/kernels/rotate/` contains the kernel spec (.yaml).
- `src/kernels/python/` contains the Python kernels (human-readable) that
  implement it and are property-tested against `collections.deque.rotate`.
"""
