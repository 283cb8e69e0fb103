"""Puzzle solutions for 2024."""