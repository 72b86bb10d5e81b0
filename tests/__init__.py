"""
Test suite for ledger_assets

Contains:
- tests/unit/          : Unit tests for individual modules
"""
