"""Game toolkit: platformer physics, particle emitters, sound bookkeeping and small game simulations."""

__version__ = "0.1.0"