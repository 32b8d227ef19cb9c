"""Operating-systems exercises: employee records with child processes, worker threads and marker threads."""

__version__ = "0.1.0"