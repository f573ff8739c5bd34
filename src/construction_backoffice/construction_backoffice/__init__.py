"""Construction back-office package.

Organized by feature modules (employees, attendance, payroll) with
service/repository layers; MySQL repositories sit behind Protocol interfaces.
"""
