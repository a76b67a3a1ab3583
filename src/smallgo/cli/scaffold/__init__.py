"""Go source payloads for the built-in templates, one directory per template."""
