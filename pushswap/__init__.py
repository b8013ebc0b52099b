"""Sort integers on two stacks and report the push_swap operations used."""

__version__ = "0.1.0"
__all__ = ["printf", "stacks", "parsing", "sorting", "cli"]