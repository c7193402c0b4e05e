"""
CLI Client Module.

Command-line client built with Typer for the Azion edge APIs.

Architecture:
- Commands are a thin presentation layer over the resource clients
- Resource clients call the APIs via HTTP (httpx)
- Every command runs one API operation and renders the result

Usage:
    azioncli --help
    azioncli edge_functions list
    azioncli edge_services describe 4321
"""
