"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt). It deals with decimal arithmetic,
the calculator state and the transitions between states.
"""
