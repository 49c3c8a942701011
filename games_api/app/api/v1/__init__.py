"""
Version 1 of the Games API.
"""
