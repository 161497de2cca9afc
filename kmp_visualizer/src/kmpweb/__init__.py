"""Front ends for the traced KMP engine: Flask web UI and command-line trace printer."""
