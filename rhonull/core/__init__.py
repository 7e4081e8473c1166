"""
rhonull.core
============

Infrastructure shared by the null generators: the failure kinds reported to
callers and the orthogonal projection capability consumed by the residual
generator.
"""
