"""
Kernel layer.

This package groups the deterministic StableSwap kernels.
- `stableswap/kernels/dex/` contains the kernel profile file (.yaml): word
  widths, boundary widths and Newton iteration caps.
- `stableswap/kernels/python/` contains the production Python kernels that
  implement the solver, swap and pool-token semantics.
"""
