"""Application layer: ports and the render use case."""
