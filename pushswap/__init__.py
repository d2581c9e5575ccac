"""Sort distinct integers with two stacks and a fixed set of stack moves."""

__version__ = "1.0.0"