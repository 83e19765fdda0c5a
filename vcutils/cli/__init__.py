"""
Command-line interface for VCUtils.
"""
