"""Application services orchestrating repositories behind ports."""
