"""cbsummary: fleet-wide summary reports for Couchbase clusters."""

__version__ = "0.3.0"
