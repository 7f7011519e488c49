"""
The MODEL layer contains the record types and the pure parsing logic.
It has NO knowledge of files, the command line, or logging configuration.
"""
