"""
KidneyGuard - kidney disease risk assessment.
"""
__version__ = "1.0.0"
