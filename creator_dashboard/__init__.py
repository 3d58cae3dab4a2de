"""
Creator Dashboard - seller revenue statistics API
"""
__version__ = "1.0.0"
