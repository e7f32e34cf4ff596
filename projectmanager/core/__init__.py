"""Application-wide infrastructure: config, logging, extensions and error handling."""
