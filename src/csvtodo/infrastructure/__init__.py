"""Infrastructure adapters for csvtodo."""
