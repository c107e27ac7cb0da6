"""Terminal configuration menu for RISC-V SBI firmware prototypes, with xfel helpers."""

__version__ = "0.1.0"