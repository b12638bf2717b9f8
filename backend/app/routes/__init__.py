# Routes package init
"""
Employee API - Routes Package
==============================

Route Inventory:
    - employees.py:  the six Employee endpoints under API_PREFIX
    - health.py:     GET /health

Routes stay thin: parse the request, call EmployeeService, translate the
Outcome into a response or an application exception.
"""
