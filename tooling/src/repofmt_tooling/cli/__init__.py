"""repofmt command-line entry points."""
