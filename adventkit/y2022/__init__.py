"""Solutions to the 2022 Advent of Code puzzles, days 1 to 12, plus a template day 0."""