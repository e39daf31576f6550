"""Prime sieve, primality tests, GOST/Miller/Pocklington prime construction and small numeric exercises."""

__version__ = "0.1.0"