"""Allow running the CLI with ``python -m task_tracker``."""

from .cli.main import app

if __name__ == "__main__":
    app(prog_name="task-cli")
