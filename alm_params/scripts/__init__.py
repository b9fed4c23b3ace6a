"""Command-line entry points for inspecting and editing parameter documents."""
