"""Permite ejecutar FormBuilder con python -m formbuilder."""

from formbuilder.cli import app

if __name__ == "__main__":
    app()
