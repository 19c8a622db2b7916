"""csvtodo command-line interface."""
