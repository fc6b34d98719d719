"""Game logic: body control, pipe spawning, collisions and the run lifecycle."""
