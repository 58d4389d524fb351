"""Allow running semnorm as ``python -m semnorm``."""

from .cli.main import app

app(prog_name="semnorm")
