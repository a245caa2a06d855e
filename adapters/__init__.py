"""
Adapters implementing the repository ports.
"""
