"""Monetary domain package.

This package contains classes for handling monetary amounts and currencies,
including the built-in Currency table and Money values stored as exact
integer counts of minor units.
"""
