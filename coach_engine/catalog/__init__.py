"""Static lookup tables.

Everything here is data: ordered tuples and (keyword, result) tables. The
services package holds the logic that scans them.
"""
