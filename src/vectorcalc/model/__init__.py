"""
The MODEL layer contains pure data structures and the vector arithmetic.
It has NO knowledge of the GUI (Qt) or the console front end.
"""
