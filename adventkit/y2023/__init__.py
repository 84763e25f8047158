"""The 2023 Advent of Code days: a placeholder for day 5."""