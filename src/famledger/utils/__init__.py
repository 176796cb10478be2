"""Utility functions for famledger."""

from famledger.utils.amount_parser import parse_amount

__all__ = ["parse_amount"]
