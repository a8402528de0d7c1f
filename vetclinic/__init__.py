"""Console record keeping for a small veterinary clinic: owners, patients, treatments, appointments and reports."""

__version__ = "1.0.0"