"""Entry point for ``python -m sss_core.cli``."""
from .main import app

app(prog_name="sss-core")
