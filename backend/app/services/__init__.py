# Services package init
"""
Employee API - Services Layer
==============================

Service Inventory:
    - EmployeeService: insert, list, fetch, update and delete EmployeeDetails
      rows, reporting each result as an Outcome.
"""
