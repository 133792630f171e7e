"""Allow running the inventory CLI with ``python -m kubeversions``."""

from kubeversions.cli import app

if __name__ == "__main__":
    app(prog_name="kubeversions")
