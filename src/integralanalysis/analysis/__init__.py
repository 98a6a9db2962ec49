"""
Sampling & Quadrature Engine
============================
Sampler -> {Riemann Engine, Measure Engine} -> {Level-Set Slicer, Curve/Integral Composer}.

Every routine is a pure function of its arguments; nothing is kept between
calls, so calls for different parameter sets may run concurrently.
"""
