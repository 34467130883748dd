"""
Core domain model, mathematical primitives, and contracts.

This package contains the pure rational-arithmetic engine. It has no I/O
and no dependency on the presentation layer (src.calculator).
"""
