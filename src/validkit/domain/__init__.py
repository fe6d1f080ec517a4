"""Domain layer: rules, results, templates, exceptions and ports."""
