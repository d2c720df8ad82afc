"""
Materials Domain - Missing, quoted and ordered materials.
"""
