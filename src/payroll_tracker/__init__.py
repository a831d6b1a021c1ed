"""Payroll Tracker package.

Organized by feature modules (employees, attendance, payroll, payments,
reports) with a thin Flask controller layer over service/repository layers.
"""
