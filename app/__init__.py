"""
File relay service package.
"""
