"""
Chart List Items — core package (services and the tool view).
"""
