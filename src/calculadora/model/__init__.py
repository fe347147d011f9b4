"""
The MODEL layer contains the calculator state machine and number formatting.
It has NO knowledge of the GUI (Qt).
"""
