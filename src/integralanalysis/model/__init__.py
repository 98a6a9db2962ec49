"""
The MODEL layer contains pure data structures: intervals, result primitives
and function specifications. It has NO knowledge of plotting.
"""
