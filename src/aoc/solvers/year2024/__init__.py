"""Solvers for Advent of Code 2024."""
