"""The ``purse`` command-line interface."""
