"""InvestSmart — financial calculators and a small persisted record store."""

__version__ = "0.1.0"
