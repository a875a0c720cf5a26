"""Clients for third-party payroll APIs."""
