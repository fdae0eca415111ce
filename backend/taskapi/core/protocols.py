"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - External lookups accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol, not ABC: WeatherClient and test fakes satisfy it structurally
"""

from typing import Protocol


class WeatherLookup(Protocol):
    """Contract for the current-weather call-out — implemented by shell."""
    async def fetch_description(self, city: str) -> str: ...
