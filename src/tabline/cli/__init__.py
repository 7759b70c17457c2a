"""Terminal front end: input reader, renderer and command line."""
