"""Report parsing and edit tools."""
