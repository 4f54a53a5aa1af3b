"""NeonBreak game logic: entities, physics, levels, and rendering."""
