"""
Allow running the package directly: python -m mandelstep
"""
from .app import run

if __name__ == "__main__":
    run()
