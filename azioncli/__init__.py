"""
azioncli.

Command-line client for the Azion edge platform: edge functions,
edge services and edge service resources.
"""
