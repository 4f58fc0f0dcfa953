"""
A prefix-notation calculator: numbers, flags, variables, functions, and one conditional.
"""
