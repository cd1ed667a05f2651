"""
Core orchestration layer: shared context, exception types and the file-level
conversion pipeline.
"""
