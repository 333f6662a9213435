"""Mint Replica Lite portfolio valuation service."""
