"""Domain layer: aggregates, repository contracts and domain errors."""
