"""Top-level package for kinroute.

kinroute answers relationship questions over a genealogical dataset:
how two persons are related (shortest chain of parent, child and spouse
links), who lies within a few degrees of a person, and how connected
the whole population is.
"""

__version__ = "0.1.0"
