"""Commands registered on the outlook-exe Typer application."""
