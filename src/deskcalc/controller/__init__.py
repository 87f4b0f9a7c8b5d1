"""
The CONTROLLER layer connects the pure model to Qt: it owns the running
engine, translates keys and button labels into events and notifies the
view through signals.
"""
