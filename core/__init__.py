"""Command parsing, task model, storage, and the interpreter that ties them together."""
