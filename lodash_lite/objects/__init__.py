"""
Object utilities: safe access, key selection, recursive merge, deep clone,
emptiness and deep equality checks over nested records and sequences.
"""
