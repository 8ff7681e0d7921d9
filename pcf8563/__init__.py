"""Driver for the NXP PCF8563 real-time clock over I2C, with a small command line tool."""

__version__ = "0.1.2"