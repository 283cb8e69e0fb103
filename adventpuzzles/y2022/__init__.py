"""Puzzle solutions for 2022."""