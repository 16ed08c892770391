"""Domain layer - protocols the core and infrastructure layers agree on."""
