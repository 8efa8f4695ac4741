"""Update workflow: release lookup, version marker, download, installation."""
