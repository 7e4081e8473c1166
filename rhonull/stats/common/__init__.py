"""
rhonull.stats.common
====================

Generic utilities shared by the null generators: rank computation, the rho
scaling constant, and seed handling for reproducible random streams.
"""
