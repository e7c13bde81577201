"""
Python rotation kernels.

These modules are designed to be:
- deterministic (integer-only),
- easy to audit (explicit index arithmetic),
- small surface-area (pure functions mutating the caller's sequence in place),
- interchangeable: every kernel has the signature `(nums, k) -> None`.
"""
