"""Module entry point for the errstack CLI."""

from errstack.cli import app

if __name__ == "__main__":
    app(prog_name="errstack")
