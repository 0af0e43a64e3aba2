"""
HR records project package.

Employees and user accounts are stored through repository abstractions and
every tracked mutation leaves an audit entry behind (see ``apps.audit``).
"""
