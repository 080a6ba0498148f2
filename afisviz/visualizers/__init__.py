"""Stage visualizers. Importing a module registers its visualizers."""
