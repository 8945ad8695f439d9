"""Package configuration: settings and the known-field table loader."""
