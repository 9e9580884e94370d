"""
Core risk assessment modules.
"""
