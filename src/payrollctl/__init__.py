"""payrollctl — interactive employee payroll console."""

__version__ = "0.1.0"
