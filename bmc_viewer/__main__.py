"""
Main entry point for running the package directly.

    python -m bmc_viewer --host 10.0.0.5 -u root -p calvin
"""

from .cli import run

if __name__ == "__main__":
    run()
