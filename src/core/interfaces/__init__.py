"""Core interfaces.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- Inverts dependencies: the Core depends on abstractions, not on Node.js or
  minify-html.
"""
