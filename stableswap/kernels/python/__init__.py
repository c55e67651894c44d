"""
Production Python kernels.

These modules are designed to be:
- deterministic (integer-only, floor rounding),
- width-checked (every intermediate goes through a fixed-width `Word`),
- easy to audit (explicit intermediate variables),
- small surface-area (pure functions, typed results).
"""
