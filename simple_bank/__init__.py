"""
Simple Bank

A small banking domain: base, savings and current accounts with
deposit and withdrawal policies, a one-directional balance merge and
plain-text account statements. All monetary values use Decimal.
"""

__version__ = "1.0.0"
