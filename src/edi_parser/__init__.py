"""
edi_parser: escape-aware EDI (EDIFACT / X12) tokenizer, segment reader and
envelope containers with trailer synthesis.
"""

__version__ = "0.1.0"
