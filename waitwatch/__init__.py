"""
WaitWatch restaurant discovery service.

Finds restaurants around a reference point, estimates how busy they are and
how long an order takes, and looks up the landmarks around a restaurant.
"""
