"""imapmaildir-units: generate systemd user units and account configs for imapmaildir."""

__version__ = "0.1.0"
