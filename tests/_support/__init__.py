"""Shared test doubles and route-declaration modules."""
