"""Domain layer: entities, valuation services, events and ports."""
