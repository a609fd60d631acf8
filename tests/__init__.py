"""
Test suite for chrono_kit

Contains:
- tests/unit/          : Unit tests for the iterators and the step range model
"""
