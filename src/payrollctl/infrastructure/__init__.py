"""Infrastructure layer — in-memory storage for employee records.

Infrastructure may import from the domain layer only.
"""
