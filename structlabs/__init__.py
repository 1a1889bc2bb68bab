"""Study programs and library code for long numbers, theatre tables with keys, sparse matrices and stacks."""

__version__ = "0.1.0"