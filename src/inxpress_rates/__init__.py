"""
InXpress live shipping rates.

Uses the InXpress API to get live shipping rates based on package weight and dimensions.
"""

__version__ = '1.0.0'
