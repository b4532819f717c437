# state_search/problems/samples.py
# Worked examples from the puzzle statements, with their published answers.

HEIGHTMAP = """\
Sabqponm
abcryxxl
accszExk
acctuvwj
abdefghi
"""
HEIGHTMAP_ANSWERS = (31, 29)

BASIN = """\
#.######
#>>.<^<#
#.<..<<#
#>v.><>#
#<^v^^>#
######.#
"""
BASIN_ANSWERS = (18, 54)
