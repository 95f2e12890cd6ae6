"""Worked Python counterparts of the exercises, grouped by topic."""