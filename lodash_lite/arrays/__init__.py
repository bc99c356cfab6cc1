"""
Array utilities: chunking, de-duplication, one-level flattening and grouping.
"""
