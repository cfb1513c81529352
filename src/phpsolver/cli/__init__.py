"""
Command-line interface over JSON index snapshots.
"""
