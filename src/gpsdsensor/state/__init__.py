"""State/cache layer.

This package is the single source of truth for the latest gpsd report and
for deciding whether it is fresh enough to serve.
"""
