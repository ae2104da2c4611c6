"""fmrl - a colorful, alerting viewer for FileMaker Import.log files."""

__version__ = "0.1.0"
