"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) that concrete adapters implement.
- The core depends on abstractions, adapters depend on the core.
"""
