"""Puzzle solutions for 2023."""