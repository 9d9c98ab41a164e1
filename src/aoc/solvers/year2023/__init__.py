"""Solvers for Advent of Code 2023."""
