"""
Command line tools for pywynn
"""
