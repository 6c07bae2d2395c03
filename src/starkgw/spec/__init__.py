"""
Spec - Compiled contract artifact schema and models.
"""
