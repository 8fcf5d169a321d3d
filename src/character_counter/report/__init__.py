"""Click commands that print analysis results as plain text."""
