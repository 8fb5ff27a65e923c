"""Local side of a browser session: capabilities and driver processes."""
