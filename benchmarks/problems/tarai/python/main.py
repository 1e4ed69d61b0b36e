#!/usr/bin/env python3
# Tarai (Takeuchi) Benchmark - Python reference implementation
# Evaluates tarai(12, 6, 0) with each evaluation strategy; all must print 12
import sys
sys.setrecursionlimit(100000)

from tarai import VARIANTS

# Repeat multiple times for meaningful measurement
for variant in VARIANTS.values():
    result = 0
    for _ in range(10):
        result = variant.evaluate(12, 6, 0)
    print(f"{variant.name}: {result}")
