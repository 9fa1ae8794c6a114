"""
Resume Parser - heuristic resume parsing service
"""
