"""Event-driven digital logic simulation with gates, adder, mux, decoders, latches, registers and stimulus benches."""

__version__ = "0.1.0"