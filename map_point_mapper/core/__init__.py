"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants, order labels, framing presets
- exceptions: Custom exception hierarchy
- ingress: HTTP request body normalisation
"""
