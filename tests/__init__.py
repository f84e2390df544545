"""Test suite for passgate.

Test structure follows the test pyramid:
- unit/: Unit tests - domain rules, transforms and wiring with fakes
- integration/: Integration tests - real hashing libraries end-to-end
"""
