"""Puzzle solutions for 2021."""