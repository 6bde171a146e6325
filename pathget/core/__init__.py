"""
Core path resolution: key heuristics, string path parsing and `get`.
"""
