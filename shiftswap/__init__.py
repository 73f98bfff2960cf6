"""
ShiftSwap - shift-swap request tracking

Records shift-swap requests between employees and lets a reviewer approve
or deny them. State lives in a single JSON document on disk.
"""

__version__ = "0.1.0"
__author__ = "ShiftSwap Team"
