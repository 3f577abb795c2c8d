"""
circuit_analyzer - series/parallel circuit model with impedance analysis.

The core is Qt-free: models hold state, controllers own mutation and undo,
and simulation holds the pure impedance math.
"""

__version__ = "1.0.0"
