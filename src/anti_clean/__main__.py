"""Main entry point for python -m anti_clean."""
from .cli import app

if __name__ == "__main__":
    app(prog_name="anti-clean")
