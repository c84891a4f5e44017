"""
Location view engine.

Responsibilities:
- Classify each location's time proximity to one or more references.
- Filter the canonical location set by language, proximity and time of day.
- Order the result by proximity tier or name, pinning selected references.
- Plan orphan-free pagination for the ordered result.
"""
